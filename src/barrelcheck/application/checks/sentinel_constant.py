"""Sentinel constant check.

The aggregator must mention each configured metadata constant.
Presence is a plain substring test on the aggregator text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from barrelcheck.application.checks._base import BaseCheck
from barrelcheck.domain.model.enums import FindingCategory, Severity
from barrelcheck.domain.model.finding import Finding

if TYPE_CHECKING:
    from barrelcheck.domain.model.check_context import CheckContext


class SentinelConstantCheck(BaseCheck):
    """One WARNING per configured sentinel absent from the aggregator."""

    category = FindingCategory.MISSING_SENTINEL

    def check(self, context: CheckContext) -> tuple[Finding, ...]:
        """Check sentinels in configuration order."""
        return tuple(
            Finding(
                severity=Severity.WARNING,
                category=self.category,
                subject=sentinel.name,
                message=sentinel.missing_message(context.config.aggregator),
            )
            for sentinel in context.config.sentinels
            if sentinel.name not in context.aggregator_content
        )
