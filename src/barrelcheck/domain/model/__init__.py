"""Domain model: immutable value objects."""

from barrelcheck.domain.model.check_context import CheckContext
from barrelcheck.domain.model.configuration import (
    DEFAULT_SENTINELS,
    SentinelConstant,
    ValidatorConfig,
)
from barrelcheck.domain.model.enums import FindingCategory, Severity
from barrelcheck.domain.model.finding import Finding
from barrelcheck.domain.model.validation_result import ValidationResult

__all__ = [
    "CheckContext",
    "DEFAULT_SENTINELS",
    "Finding",
    "FindingCategory",
    "SentinelConstant",
    "Severity",
    "ValidationResult",
    "ValidatorConfig",
]
