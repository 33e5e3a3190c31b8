"""Export extractor port (interface)."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping


class ExportExtractorPort(ABC):
    """Port for reading re-export declarations from aggregator text.

    Infrastructure layer must provide implementation.
    The checker depends only on this interface, so a syntax-aware parser
    can replace the textual one.
    """

    @abstractmethod
    def extract_exports(self, content: str) -> tuple[str, ...]:
        """Extract relative re-export targets.

        Args:
            content: Raw aggregator text

        Returns:
            Targets without the './' prefix, in order of appearance.
            Empty tuple when nothing matches.
        """
        ...

    @abstractmethod
    def extract_constant_values(
        self,
        content: str,
        names: Iterable[str],
    ) -> Mapping[str, str]:
        """Extract string literals assigned to named constants.

        Args:
            content: Raw aggregator text
            names: Constant names to look up

        Returns:
            Mapping of name to literal value for names that have one
        """
        ...
