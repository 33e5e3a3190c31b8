"""Check protocol for consistency checks.

Users extend barrelcheck by implementing this Protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from barrelcheck.domain.model.check_context import CheckContext
    from barrelcheck.domain.model.enums import FindingCategory
    from barrelcheck.domain.model.finding import Finding


class CheckProtocol(Protocol):
    """Contract for consistency checks.

    Checks are stateless and read only the CheckContext.

    Example:
        class NoEmptyBarrel:
            category = FindingCategory.DANGLING_EXPORT

            def check(self, context: CheckContext) -> tuple[Finding, ...]:
                if context.exports:
                    return ()
                return (Finding(...),)
    """

    category: FindingCategory
    """Category of the findings this check produces."""

    def check(self, context: CheckContext) -> tuple[Finding, ...]:
        """Run the check.

        Args:
            context: Scanned files, extracted exports, aggregator text

        Returns:
            Findings in deterministic order (empty if consistent)
        """
        ...
