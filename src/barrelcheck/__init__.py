"""barrelcheck - build-time validator for barrel module export surfaces."""

__version__ = "0.1.0"

from barrelcheck.application.services import ExportValidator, validate_exports
from barrelcheck.domain.model import (
    Finding,
    SentinelConstant,
    ValidationResult,
    ValidatorConfig,
)

__all__ = [
    "ExportValidator",
    "Finding",
    "SentinelConstant",
    "ValidationResult",
    "ValidatorConfig",
    "__version__",
    "validate_exports",
]
