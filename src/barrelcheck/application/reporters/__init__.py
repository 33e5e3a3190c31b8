"""Reporters for validation results.

PlainTextReporter and JSONReporter use stdlib only;
ConsoleReporter renders with rich.
"""

from barrelcheck.application.reporters._base import BaseReporter
from barrelcheck.application.reporters.console import ConsoleConfig, ConsoleReporter
from barrelcheck.application.reporters.json_reporter import JSONReporter
from barrelcheck.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
