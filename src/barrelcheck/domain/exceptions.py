"""Domain exceptions: all public errors of barrelcheck.

Expected validation outcomes (missing files, dangling exports) are data in
ValidationResult, never exceptions. Exceptions here cover unexpected
conditions only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class BarrelCheckError(Exception):
    """Base for all barrelcheck error exceptions.

    Allows: except BarrelCheckError to catch all library errors.
    """


# N818: signals are not errors, so no "Error" suffix.
class BarrelCheckSignal(Exception):  # noqa: N818
    """Base for all barrelcheck signal exceptions (flow control, not errors)."""


class ScanError(BarrelCheckError, OSError):
    """Directory under the module root could not be listed.

    Inherits OSError for semantic correctness.

    Attributes:
        path: Directory that failed.
        reason: Error description.
    """

    def __init__(self, *, path: Path, reason: str) -> None:
        """Initialize with directory path and error reason."""
        self.path = path
        self.reason = reason
        super().__init__(f"cannot scan {path}: {reason}")


class AggregatorReadError(BarrelCheckError, OSError):
    """Aggregator module exists but cannot be read or decoded.

    Attributes:
        path: Aggregator path.
        reason: Error description.
    """

    def __init__(self, *, path: Path, reason: str) -> None:
        """Initialize with aggregator path and error reason."""
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read {path}: {reason}")


class ConfigError(BarrelCheckError, ValueError):
    """Invalid validator configuration.

    Attributes:
        field: Offending configuration key.
        reason: Why the value is invalid.
    """

    def __init__(self, field: str, reason: str) -> None:
        """Initialize with field name and reason."""
        if not field:
            raise ValueError("field must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.field = field
        self.reason = reason
        super().__init__(f"invalid config '{field}': {reason}")


class ExportSurfaceError(BarrelCheckError, AssertionError):
    """Export surface validation failed.

    Raised by assert_exports_valid() when the result has errors.
    Inherits AssertionError so test runners report it as a failure.

    Attributes:
        errors: All error messages of the result
    """

    def __init__(self, errors: tuple[str, ...]) -> None:
        if not errors:
            raise ValueError("ExportSurfaceError requires at least one error")

        self.errors = errors

        msg_parts = [f"Found {len(errors)} export surface error(s):"]
        msg_parts.extend(f"  - {e}" for e in errors)
        super().__init__("\n".join(msg_parts))


class ValidationCancelled(BarrelCheckSignal):
    """Signal that the caller cancelled a running validation.

    Raised by the scanner when the cancel event is set between
    directory traversals.
    """

    def __init__(self, path: Path) -> None:
        """Initialize with the directory about to be scanned."""
        self.path = path
        super().__init__(f"validation cancelled before scanning {path}")
