"""ValidatorConfig loading from `[tool.barrelcheck]` in pyproject.toml."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path

from barrelcheck.domain.exceptions import ConfigError
from barrelcheck.domain.model.configuration import SentinelConstant, ValidatorConfig

_TUPLE_KEYS = ("extensions", "declaration_suffixes", "doc_markers")
_STR_KEYS = ("aggregator", "index_basename")
_KNOWN_KEYS = frozenset({"module_dir", "sentinels", *_TUPLE_KEYS, *_STR_KEYS})


def load_config(root_dir: Path, base: ValidatorConfig | None = None) -> ValidatorConfig:
    """Load configuration for a project root.

    Missing pyproject.toml or missing `[tool.barrelcheck]` table is not an
    error: `base` (or defaults) is returned unchanged.

    Args:
        root_dir: Project root containing pyproject.toml
        base: Configuration to apply the table on top of

    Returns:
        Merged configuration

    Raises:
        ConfigError: If the file cannot be read or parsed, or the table is malformed
    """
    config = base or ValidatorConfig()
    pyproject = root_dir / "pyproject.toml"
    if not pyproject.is_file():
        return config

    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError("pyproject.toml", str(e)) from e
    except UnicodeDecodeError as e:
        raise ConfigError("pyproject.toml", f"encoding error: {e}") from e
    except OSError as e:
        raise ConfigError("pyproject.toml", e.strerror or str(e)) from e

    tool = data.get("tool", {})
    if not isinstance(tool, Mapping):
        raise ConfigError("tool", "must be a table")

    table = tool.get("barrelcheck")
    if table is None:
        return config
    if not isinstance(table, Mapping):
        raise ConfigError("tool.barrelcheck", "must be a table")

    return config_from_mapping(table, config)


def config_from_mapping(table: Mapping[str, object], base: ValidatorConfig) -> ValidatorConfig:
    """Apply a raw mapping of options to a base configuration.

    Raises:
        ConfigError: On unknown keys or values of the wrong type
    """
    unknown = set(table) - _KNOWN_KEYS
    if unknown:
        raise ConfigError("tool.barrelcheck", f"unknown keys: {sorted(unknown)}")

    changes: dict[str, object] = {}

    if "module_dir" in table:
        changes["module_dir"] = Path(_as_str("module_dir", table["module_dir"]))

    for key in _STR_KEYS:
        if key in table:
            changes[key] = _as_str(key, table[key])

    for key in _TUPLE_KEYS:
        if key in table:
            changes[key] = _as_str_tuple(key, table[key])

    if "sentinels" in table:
        changes["sentinels"] = _as_sentinels(table["sentinels"])

    return base.with_overrides(**changes)


def _as_str(key: str, value: object) -> str:
    """Require a string value."""
    if not isinstance(value, str):
        raise ConfigError(key, f"must be a string, got {type(value).__name__}")
    return value


def _as_str_tuple(key: str, value: object) -> tuple[str, ...]:
    """Require a list of strings."""
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(key, "must be a list of strings")
    return tuple(value)


def _as_sentinels(value: object) -> tuple[SentinelConstant, ...]:
    """Sentinels are names or {name, message} tables."""
    if not isinstance(value, list):
        raise ConfigError("sentinels", "must be a list")

    sentinels: list[SentinelConstant] = []
    for item in value:
        match item:
            case str():
                sentinels.append(_sentinel(item, None))
            case {"name": str() as name, **rest} if set(rest) <= {"message"}:
                message = rest.get("message")
                if message is not None and not isinstance(message, str):
                    raise ConfigError("sentinels", f"message of {name} must be a string")
                sentinels.append(_sentinel(name, message))
            case _:
                raise ConfigError("sentinels", f"invalid entry {item!r}")
    return tuple(sentinels)


def _sentinel(name: str, message: str | None) -> SentinelConstant:
    """Build a sentinel, reporting invalid values as configuration errors."""
    try:
        return SentinelConstant(name, message)
    except ValueError as e:
        raise ConfigError("sentinels", str(e)) from e
