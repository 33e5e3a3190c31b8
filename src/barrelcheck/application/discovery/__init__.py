"""Discovery of module files under the module root."""

from barrelcheck.application.discovery.scanner import relative_paths, scan_module_files

__all__ = [
    "relative_paths",
    "scan_module_files",
]
