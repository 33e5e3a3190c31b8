"""Dangling export check.

Every declaration must resolve to a module on disk, either directly or
through a directory index module.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from barrelcheck.application.checks._base import BaseCheck
from barrelcheck.domain.model.enums import FindingCategory, Severity
from barrelcheck.domain.model.finding import Finding

if TYPE_CHECKING:
    from pathlib import Path

    from barrelcheck.domain.model.check_context import CheckContext
    from barrelcheck.domain.model.configuration import ValidatorConfig


def candidate_paths(module_root: Path, export: str, config: ValidatorConfig) -> tuple[Path, ...]:
    """On-disk locations a declaration may resolve to, in lookup order.

    `<export><ext>` for each extension first, then
    `<export>/<index><ext>` for each extension.
    """
    direct = tuple(module_root / f"{export}{ext}" for ext in config.extensions)
    index = tuple(
        module_root / export / f"{config.index_basename}{ext}" for ext in config.extensions
    )
    return direct + index


class DanglingExportCheck(BaseCheck):
    """One ERROR per declaration that resolves to no file.

    Errors accumulate; one dangling export does not stop the others
    from being checked.
    """

    category = FindingCategory.DANGLING_EXPORT

    def check(self, context: CheckContext) -> tuple[Finding, ...]:
        """Resolve each declaration, in aggregator order."""
        findings: list[Finding] = []

        for export in context.exports:
            candidates = candidate_paths(context.module_root, export, context.config)
            if any(path.exists() for path in candidates):
                continue
            findings.append(
                Finding(
                    severity=Severity.ERROR,
                    category=self.category,
                    subject=export,
                    message=f'Export "{export}" references non-existent module',
                )
            )

        return tuple(findings)
