"""Application layer for export surface validation.

Components:
- discovery: module file scanning
- checks: orphan, dangling export and sentinel checks
- reporters: output formatting (PlainText, Console, JSON)
- services: main facade (ExportValidator)
"""

from barrelcheck.application.checks import (
    BaseCheck,
    DanglingExportCheck,
    OrphanFileCheck,
    SentinelConstantCheck,
    default_checks,
)
from barrelcheck.application.discovery import relative_paths, scan_module_files
from barrelcheck.application.reporters import (
    BaseReporter,
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)
from barrelcheck.application.services import ExportValidator, validate_exports

__all__ = [
    # Discovery
    "scan_module_files",
    "relative_paths",
    # Checks
    "BaseCheck",
    "OrphanFileCheck",
    "DanglingExportCheck",
    "SentinelConstantCheck",
    "default_checks",
    # Reporters
    "BaseReporter",
    "PlainTextReporter",
    "ConsoleReporter",
    "JSONReporter",
    # Services
    "ExportValidator",
    "validate_exports",
]
