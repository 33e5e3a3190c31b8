"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, TextIO

from barrelcheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from barrelcheck.domain.model.finding import Finding
    from barrelcheck.domain.model.validation_result import ValidationResult


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Top-level keys mirror ValidationResult (valid, errors, warnings,
    exports, files) so CI scripts can read them directly.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        super().__init__(output)
        self._indent = indent

    def report(self, result: ValidationResult) -> None:
        """Report validation result as JSON.

        Args:
            result: Complete validation result
        """
        json.dump(result_to_dict(result), self._output, indent=self._indent)
        self._output.write("\n")


def result_to_dict(result: ValidationResult) -> dict[str, object]:
    """Convert ValidationResult to JSON-serializable dict."""
    return {
        "valid": result.valid,
        "errors": list(result.errors),
        "warnings": list(result.warnings),
        "exports": list(result.exports),
        "files": list(result.files),
        "metadata": dict(result.metadata),
        "findings": [_finding_to_dict(f) for f in result.findings],
    }


def _finding_to_dict(finding: Finding) -> dict[str, object]:
    """Convert Finding to dict."""
    return {
        "severity": finding.severity.name,
        "category": finding.category.name,
        "subject": finding.subject,
        "message": finding.message,
    }
