"""Infrastructure adapters implementing domain ports."""

from barrelcheck.infrastructure.adapters.regex_extractor import RegexExportExtractor

__all__ = ["RegexExportExtractor"]
