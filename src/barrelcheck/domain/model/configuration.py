"""Validator configuration.

Defaults describe the layout the tool was built for: a `src/ai-studio`
directory whose `index.ts` barrel re-exports every module in it.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Self

from barrelcheck.domain.exceptions import ConfigError


@dataclass(frozen=True, slots=True)
class SentinelConstant:
    """Named metadata constant the aggregator must declare.

    Attributes:
        name: Identifier searched for in the aggregator text
        message: Warning message when absent. None = default message.
    """

    name: str
    message: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if self.message is not None and not self.message:
            raise ValueError("message must be None or non-empty")

    def missing_message(self, aggregator: str) -> str:
        """Warning text reported when the constant is absent."""
        if self.message is not None:
            return self.message
        return f"{self.name} constant not found in {aggregator}"


DEFAULT_SENTINELS: tuple[SentinelConstant, ...] = (
    SentinelConstant("AI_STUDIO_VERSION"),
    SentinelConstant("AI_STUDIO_SYNCED_AT"),
)


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Configuration DTO for export validation.

    Immutable configuration object with FAIL-FIRST validation.
    All fields have defaults; override any of them.

    Attributes:
        module_dir: Module root, relative to the project root (or absolute)
        aggregator: File name of the barrel module inside module_dir
        extensions: Recognized source extensions, in resolution order
        declaration_suffixes: Suffixes of declarations-only modules (excluded)
        doc_markers: Substrings marking documentation files (excluded)
        index_basename: Basename of a directory's index module
        sentinels: Constants the aggregator must declare
    """

    module_dir: Path = Path("src/ai-studio")
    aggregator: str = "index.ts"
    extensions: tuple[str, ...] = (".ts", ".tsx")
    declaration_suffixes: tuple[str, ...] = (".d.ts",)
    doc_markers: tuple[str, ...] = ("README",)
    index_basename: str = "index"
    sentinels: tuple[SentinelConstant, ...] = field(default=DEFAULT_SENTINELS)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.module_dir, Path):
            object.__setattr__(self, "module_dir", Path(self.module_dir))
        for name in ("extensions", "declaration_suffixes", "doc_markers", "sentinels"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

        if not self.aggregator:
            raise ConfigError("aggregator", "must not be empty")
        if "/" in self.aggregator or "\\" in self.aggregator:
            raise ConfigError("aggregator", f"must be a file name, got {self.aggregator!r}")

        if not self.extensions:
            raise ConfigError("extensions", "must not be empty")
        for ext in self.extensions:
            if not ext.startswith(".") or len(ext) < 2:
                raise ConfigError("extensions", f"must look like '.ext', got {ext!r}")

        if not self.index_basename:
            raise ConfigError("index_basename", "must not be empty")

        names = [s.name for s in self.sentinels]
        if len(names) != len(set(names)):
            raise ConfigError("sentinels", f"duplicate names in {names}")

    def module_root(self, root_dir: Path) -> Path:
        """Absolute module root for a project root."""
        return root_dir / self.module_dir

    def strip_extension(self, relative: str) -> str:
        """Logical module name: relative path without its source extension."""
        for ext in sorted(self.extensions, key=len, reverse=True):
            if relative.endswith(ext):
                return relative[: -len(ext)]
        return relative

    def with_overrides(self, **changes: object) -> Self:
        """Copy with the non-None changes applied."""
        applied = {k: v for k, v in changes.items() if v is not None}
        return replace(self, **applied)
