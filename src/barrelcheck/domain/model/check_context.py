"""Check context: everything a consistency check reads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from barrelcheck.domain.model.configuration import ValidatorConfig


@dataclass(frozen=True, slots=True)
class CheckContext:
    """Inputs shared by all checks of one validation run.

    Built once after scanning and extraction; checks never touch the
    aggregator file again.

    Attributes:
        module_root: Absolute module root directory
        aggregator_content: Raw aggregator text
        exports: Extracted declaration targets
        files: Module file paths relative to module_root (POSIX form)
        config: Active configuration
    """

    module_root: Path
    aggregator_content: str
    exports: tuple[str, ...]
    files: tuple[str, ...]
    config: ValidatorConfig

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.module_root is None:
            raise TypeError("module_root must not be None")
        if self.config is None:
            raise TypeError("config must not be None")
