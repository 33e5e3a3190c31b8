"""Reporter protocol: contract for all reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from barrelcheck.domain.model.validation_result import ValidationResult


class ReporterProtocol(Protocol):
    """Protocol for validation result reporters.

    Reporters decide format and destination; the validation itself
    never prints.
    """

    def report(self, result: ValidationResult) -> None:
        """Report validation result.

        Args:
            result: Validation result to format.
        """
        ...
