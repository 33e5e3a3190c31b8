"""pytest plugin for barrelcheck.

Provides fixtures for export surface tests:
    barrel_config: Validator configuration (override in conftest.py)
    barrel_result: ValidationResult for the project root

Configuration (pytest.ini or pyproject.toml):
    barrel_module_dir: Module directory (default: src/ai-studio)
    barrel_aggregator: Barrel file name (default: index.ts)

Example:
    def test_exports(barrel_result):
        assert_exports_valid(barrel_result)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from barrelcheck.presentation.pytest_plugin.fixtures import (
    assert_exports_valid,
    barrel_config,
    barrel_result,
)

if TYPE_CHECKING:
    import pytest

__all__ = [
    "assert_exports_valid",
    "barrel_config",
    "barrel_result",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini("barrel_module_dir", "Module directory relative to rootdir", default="")
    parser.addini("barrel_aggregator", "Barrel file name inside barrel_module_dir", default="")


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "barrel: mark test as export surface test",
    )
