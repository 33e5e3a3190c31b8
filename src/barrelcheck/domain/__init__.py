"""Domain layer: model, ports and exceptions. No I/O."""
