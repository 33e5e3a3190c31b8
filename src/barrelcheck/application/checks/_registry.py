"""Check registry.

Central list of built-in checks.
"""

from __future__ import annotations

from barrelcheck.application.checks._base import BaseCheck
from barrelcheck.application.checks.dangling_export import DanglingExportCheck
from barrelcheck.application.checks.orphan_file import OrphanFileCheck
from barrelcheck.application.checks.sentinel_constant import SentinelConstantCheck
from barrelcheck.domain.ports.check import CheckProtocol

# Order matters: findings are reported in this order
_ALL_CHECKS: tuple[type[BaseCheck], ...] = (
    OrphanFileCheck,
    DanglingExportCheck,
    SentinelConstantCheck,
)


def default_checks() -> tuple[CheckProtocol, ...]:
    """Instantiate all built-in checks in reporting order."""
    return tuple(check_cls() for check_cls in _ALL_CHECKS)
