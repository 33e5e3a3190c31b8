"""Orphan file check.

Warns about module files that no re-export declaration reaches.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from barrelcheck.application.checks._base import BaseCheck
from barrelcheck.domain.model.enums import FindingCategory, Severity
from barrelcheck.domain.model.finding import Finding

if TYPE_CHECKING:
    from barrelcheck.domain.model.check_context import CheckContext


def is_covered(module_name: str, exports: Iterable[str]) -> bool:
    """Whether any declaration covers a logical module name.

    A declaration covers the module when it names it exactly, when it
    addresses a directory the module lives in, or when it addresses a
    deeper file below a directory-level module name.

    Example:
        >>> is_covered("sub/b", ["sub"])
        True
        >>> is_covered("subway", ["sub"])
        False
    """
    return any(
        export == module_name
        or module_name.startswith(export + "/")
        or export.startswith(module_name + "/")
        for export in exports
    )


class OrphanFileCheck(BaseCheck):
    """One WARNING per scanned file not covered by any declaration.

    Advisory: an aggregator may lag behind during incremental integration.
    """

    category = FindingCategory.ORPHAN_FILE

    def check(self, context: CheckContext) -> tuple[Finding, ...]:
        """Find uncovered module files, in scan order."""
        aggregator = context.config.aggregator
        findings: list[Finding] = []

        for file in context.files:
            module_name = context.config.strip_extension(file)
            if is_covered(module_name, context.exports):
                continue
            findings.append(
                Finding(
                    severity=Severity.WARNING,
                    category=self.category,
                    subject=file,
                    message=f'File "{file}" exists but is not exported from {aggregator}',
                )
            )

        return tuple(findings)
