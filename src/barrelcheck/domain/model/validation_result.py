"""Validation result aggregate."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from barrelcheck.domain.model.enums import Severity
from barrelcheck.domain.model.finding import Finding


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of one export surface validation run.

    Immutable aggregate. `valid`, `errors` and `warnings` are derived from
    `findings`, so `valid` is False iff `errors` is non-empty by construction.

    Attributes:
        findings: All findings in discovery order
        exports: Extracted declaration targets, in aggregator order
        files: Module file paths relative to the module root (POSIX form)
        metadata: Literal values of sentinel constants found in the aggregator
    """

    findings: tuple[Finding, ...] = ()
    exports: tuple[str, ...] = ()
    files: tuple[str, ...] = ()
    metadata: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for finding in self.findings:
            if not isinstance(finding, Finding):
                raise TypeError(f"findings must contain Finding, got {type(finding).__name__}")
        if any(not export for export in self.exports):
            raise ValueError("exports must not contain empty targets")
        if not isinstance(self.metadata, MappingProxyType):
            object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def errors(self) -> tuple[str, ...]:
        """Messages of ERROR findings, in order."""
        return tuple(f.message for f in self.findings if f.severity is Severity.ERROR)

    @property
    def warnings(self) -> tuple[str, ...]:
        """Messages of WARNING findings, in order."""
        return tuple(f.message for f in self.findings if f.severity is Severity.WARNING)

    @property
    def valid(self) -> bool:
        """True when no ERROR finding was produced."""
        return not any(f.is_error for f in self.findings)

    @property
    def error_count(self) -> int:
        """Number of errors."""
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        """Number of warnings."""
        return len(self.warnings)

    @classmethod
    def aborted(cls, finding: Finding) -> ValidationResult:
        """Result of a run stopped by a structural error.

        Files and exports stay empty: nothing past the abort is computed.
        """
        if not finding.is_error:
            raise ValueError("aborted result requires an ERROR finding")
        return cls(findings=(finding,))
