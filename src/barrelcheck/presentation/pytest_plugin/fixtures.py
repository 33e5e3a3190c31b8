"""pytest fixtures for export surface validation.

User overrides barrel_config in their conftest.py for custom layouts.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from barrelcheck.application.services import ExportValidator
from barrelcheck.domain.exceptions import ExportSurfaceError
from barrelcheck.infrastructure.config import load_config

if TYPE_CHECKING:
    from barrelcheck.domain.model.configuration import ValidatorConfig
    from barrelcheck.domain.model.validation_result import ValidationResult


def _get_ini_value(config: pytest.Config, name: str) -> str | None:
    """Get ini value from pytest config, None when unset."""
    value = config.getini(name)
    if value:
        return str(value)
    return None


def _root_dir(request: pytest.FixtureRequest) -> Path:
    """pytest rootdir as a Path."""
    return request.config.rootpath


@pytest.fixture(scope="session")
def barrel_config(request: pytest.FixtureRequest) -> ValidatorConfig:
    """Configuration from pyproject.toml, then pytest ini options.

    Reads `[tool.barrelcheck]`, then barrel_module_dir and
    barrel_aggregator from pytest.ini or pyproject.toml.

    Returns:
        ValidatorConfig
    """
    module_dir = _get_ini_value(request.config, "barrel_module_dir")
    return load_config(_root_dir(request)).with_overrides(
        module_dir=Path(module_dir) if module_dir else None,
        aggregator=_get_ini_value(request.config, "barrel_aggregator"),
    )


@pytest.fixture(scope="session")
def barrel_result(
    request: pytest.FixtureRequest,
    barrel_config: ValidatorConfig,
) -> ValidationResult:
    """Validation result for the pytest rootdir.

    Returns:
        ValidationResult
    """
    return ExportValidator(barrel_config).validate(_root_dir(request))


def assert_exports_valid(result: ValidationResult) -> None:
    """Fail with every error message when the result is invalid.

    Raises:
        ExportSurfaceError: If result has errors
    """
    if not result.valid:
        raise ExportSurfaceError(result.errors)
