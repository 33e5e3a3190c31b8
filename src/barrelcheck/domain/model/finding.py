"""Finding value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from barrelcheck.domain.model.enums import Severity

if TYPE_CHECKING:
    from barrelcheck.domain.model.enums import FindingCategory


@dataclass(frozen=True, slots=True)
class Finding:
    """Single inconsistency between module tree and aggregator.

    Attributes:
        severity: ERROR invalidates the result, WARNING does not
        category: Kind of inconsistency
        subject: What is affected (file path, export target, constant name)
        message: Human-readable message, reported verbatim
    """

    severity: Severity
    category: FindingCategory
    subject: str
    message: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.severity is None:
            raise TypeError("severity must not be None")
        if self.category is None:
            raise TypeError("category must not be None")
        if not self.subject:
            raise ValueError("subject must not be empty")
        if not self.message:
            raise ValueError("message must not be empty")

    @property
    def is_error(self) -> bool:
        """True for ERROR severity."""
        return self.severity is Severity.ERROR

    def __str__(self) -> str:
        """Format finding for display."""
        return f"[{self.severity.name}] {self.message}"
