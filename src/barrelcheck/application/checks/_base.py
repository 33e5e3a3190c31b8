"""Base check class for consistency checks.

Provides default implementation of CheckProtocol.
Concrete checks inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from barrelcheck.domain.model.check_context import CheckContext
    from barrelcheck.domain.model.enums import FindingCategory
    from barrelcheck.domain.model.finding import Finding


class BaseCheck(ABC):
    """Base class for checks implementing CheckProtocol.

    Concrete checks must:
    1. Set `category` class attribute
    2. Implement `check()` method
    """

    category: FindingCategory
    """Category of the findings this check produces."""

    @abstractmethod
    def check(self, context: CheckContext) -> tuple[Finding, ...]:
        """Run the check and return findings.

        Args:
            context: Scanned files, extracted exports, aggregator text

        Returns:
            Tuple of findings (empty if consistent)
        """
