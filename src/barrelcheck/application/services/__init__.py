"""Application services: main facade."""

from barrelcheck.application.services.export_validator import ExportValidator, validate_exports

__all__ = ["ExportValidator", "validate_exports"]
