"""Infrastructure layer: adapters and configuration sources."""
