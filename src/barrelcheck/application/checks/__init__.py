"""Consistency checks between module tree and aggregator.

- OrphanFileCheck: files no declaration reaches (WARNING)
- DanglingExportCheck: declarations with no file (ERROR)
- SentinelConstantCheck: missing metadata constants (WARNING)
"""

from barrelcheck.application.checks._base import BaseCheck
from barrelcheck.application.checks._registry import default_checks
from barrelcheck.application.checks.dangling_export import DanglingExportCheck, candidate_paths
from barrelcheck.application.checks.orphan_file import OrphanFileCheck, is_covered
from barrelcheck.application.checks.sentinel_constant import SentinelConstantCheck

__all__ = [
    # Base
    "BaseCheck",
    # Checks
    "OrphanFileCheck",
    "DanglingExportCheck",
    "SentinelConstantCheck",
    # Helpers
    "candidate_paths",
    "is_covered",
    "default_checks",
]
