"""Plain text reporter using print().

Stdlib-only reporter; the default CLI output.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, TextIO

from barrelcheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from barrelcheck.domain.model.validation_result import ValidationResult


class PlainTextReporter(BaseReporter):
    """Plain text reporter: counts, warnings, errors, verdict.

    Warnings are listed before errors, each as a "   - message" line.
    """

    def __init__(self, output: TextIO | None = None, *, title: str = "module exports") -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            title: What is being validated, used in header and verdict
        """
        super().__init__(output)
        self._title = title

    def report(self, result: ValidationResult) -> None:
        """Report validation result as plain text.

        Args:
            result: Complete validation result
        """
        self._write(f"Validating {self._title}...")
        self._write()
        self._report_summary(result)

        if result.warnings:
            self._report_list("Warnings", result.warnings)

        if result.errors:
            self._report_list("Errors", result.errors)

        if result.valid:
            self._write()
            self._write(f"OK: {self._title} are properly configured!")

    def _report_summary(self, result: ValidationResult) -> None:
        """Print counts and sentinel metadata."""
        self._write(f"Module files: {len(result.files)}")
        self._write(f"Configured exports: {len(result.exports)}")
        for name, value in result.metadata.items():
            self._write(f"{name}: {value}")

    def _report_list(self, heading: str, messages: Sequence[str]) -> None:
        """Print a heading followed by one bullet per message."""
        self._write()
        self._write(f"{heading}:")
        for message in messages:
            self._write(f"   - {message}")
