"""Tests for domain/model/configuration.py."""

from pathlib import Path

import pytest

from barrelcheck.domain.exceptions import ConfigError
from barrelcheck.domain.model.configuration import (
    DEFAULT_SENTINELS,
    SentinelConstant,
    ValidatorConfig,
)


class TestValidatorConfigDefaults:
    """Default layout."""

    def test_default_values(self) -> None:
        """Defaults describe the src/ai-studio layout."""
        config = ValidatorConfig()

        assert config.module_dir == Path("src/ai-studio")
        assert config.aggregator == "index.ts"
        assert config.extensions == (".ts", ".tsx")
        assert config.declaration_suffixes == (".d.ts",)
        assert config.doc_markers == ("README",)
        assert config.index_basename == "index"
        assert config.sentinels == DEFAULT_SENTINELS

    def test_default_sentinel_names(self) -> None:
        """Version and synced-at sentinels are required by default."""
        names = [s.name for s in DEFAULT_SENTINELS]

        assert names == ["AI_STUDIO_VERSION", "AI_STUDIO_SYNCED_AT"]

    def test_module_root(self, tmp_path: Path) -> None:
        """module_root joins project root and module_dir."""
        assert ValidatorConfig().module_root(tmp_path) == tmp_path / "src" / "ai-studio"

    def test_string_module_dir_coerced(self) -> None:
        """module_dir given as str becomes a Path."""
        config = ValidatorConfig(module_dir="lib/barrel")  # type: ignore[arg-type]

        assert config.module_dir == Path("lib/barrel")

    def test_list_extensions_coerced(self) -> None:
        """Sequence fields given as lists become tuples."""
        config = ValidatorConfig(extensions=[".js"])  # type: ignore[arg-type]

        assert config.extensions == (".js",)


class TestValidatorConfigValidation:
    """FAIL-FIRST validation."""

    def test_empty_aggregator_raises(self) -> None:
        """Aggregator name must not be empty."""
        with pytest.raises(ConfigError, match="aggregator"):
            ValidatorConfig(aggregator="")

    def test_aggregator_with_separator_raises(self) -> None:
        """Aggregator must be a bare file name."""
        with pytest.raises(ConfigError, match="file name"):
            ValidatorConfig(aggregator="sub/index.ts")

    def test_empty_extensions_raises(self) -> None:
        """At least one extension is required."""
        with pytest.raises(ConfigError, match="extensions"):
            ValidatorConfig(extensions=())

    def test_extension_without_dot_raises(self) -> None:
        """Extensions must start with a dot."""
        with pytest.raises(ConfigError, match="'.ext'"):
            ValidatorConfig(extensions=("ts",))

    def test_duplicate_sentinels_raise(self) -> None:
        """Sentinel names must be unique."""
        with pytest.raises(ConfigError, match="duplicate"):
            ValidatorConfig(sentinels=(SentinelConstant("A"), SentinelConstant("A")))

    def test_config_error_is_value_error(self) -> None:
        """ConfigError can be caught as ValueError."""
        with pytest.raises(ValueError):
            ValidatorConfig(index_basename="")


class TestStripExtension:
    """Tests for ValidatorConfig.strip_extension."""

    def test_strips_ts(self) -> None:
        """.ts is removed."""
        assert ValidatorConfig().strip_extension("utils/greet.ts") == "utils/greet"

    def test_strips_tsx(self) -> None:
        """.tsx is removed as a whole."""
        assert ValidatorConfig().strip_extension("Button.tsx") == "Button"

    def test_longest_extension_wins(self) -> None:
        """Overlapping extensions strip the longest match."""
        config = ValidatorConfig(extensions=(".js", ".min.js"))

        assert config.strip_extension("lib/app.min.js") == "lib/app"

    def test_unknown_extension_unchanged(self) -> None:
        """Paths without a known extension are returned as-is."""
        assert ValidatorConfig().strip_extension("notes.md") == "notes.md"


class TestWithOverrides:
    """Tests for ValidatorConfig.with_overrides."""

    def test_none_values_ignored(self) -> None:
        """None means keep the current value."""
        config = ValidatorConfig().with_overrides(module_dir=None, aggregator=None)

        assert config == ValidatorConfig()

    def test_values_applied(self) -> None:
        """Non-None values replace fields."""
        config = ValidatorConfig().with_overrides(aggregator="index.tsx")

        assert config.aggregator == "index.tsx"

    def test_overrides_validated(self) -> None:
        """Overrides go through the same validation."""
        with pytest.raises(ConfigError):
            ValidatorConfig().with_overrides(aggregator="a/b.ts")


class TestSentinelConstant:
    """Tests for SentinelConstant."""

    def test_default_message(self) -> None:
        """Default message names constant and aggregator."""
        sentinel = SentinelConstant("AI_STUDIO_VERSION")

        assert (
            sentinel.missing_message("index.ts")
            == "AI_STUDIO_VERSION constant not found in index.ts"
        )

    def test_custom_message(self) -> None:
        """Custom message is returned verbatim."""
        sentinel = SentinelConstant("BUILD_ID", "declare BUILD_ID for CI")

        assert sentinel.missing_message("index.ts") == "declare BUILD_ID for CI"

    def test_empty_name_raises(self) -> None:
        """Name must not be empty."""
        with pytest.raises(ValueError, match="name"):
            SentinelConstant("")

    def test_empty_message_raises(self) -> None:
        """Message must be None or non-empty."""
        with pytest.raises(ValueError, match="message"):
            SentinelConstant("A", "")
