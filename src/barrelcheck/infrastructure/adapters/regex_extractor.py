"""Regex-based export extractor adapter.

Implements ExportExtractorPort with a textual pass over the aggregator.
Not a parser: conditional code is not evaluated and comments are not
stripped, so a commented-out re-export is still reported as a declaration.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from barrelcheck.domain.ports.export_extractor import ExportExtractorPort

logger = logging.getLogger(__name__)

# export * from "./x" | export { a, b } from "./x" | export name from "./x"
_REEXPORT_PATTERN = re.compile(
    r"""export\s+(?:\*\s+from|\{[^}]+\}\s+from|\w+\s+from)\s+["']\./([^"']+)["']"""
)


class RegexExportExtractor(ExportExtractorPort):
    """Extractor matching the three re-export shapes textually.

    Stateless. Only same-directory-relative targets ('./...') are
    returned; package and parent-relative re-exports are skipped.
    """

    def extract_exports(self, content: str) -> tuple[str, ...]:
        """Extract relative re-export targets.

        Args:
            content: Raw aggregator text

        Returns:
            Targets without the './' prefix, in order of appearance
        """
        targets = tuple(m.group(1) for m in _REEXPORT_PATTERN.finditer(content) if m.group(1))
        logger.debug("extracted %d re-export target(s)", len(targets))
        return targets

    def extract_constant_values(
        self,
        content: str,
        names: Iterable[str],
    ) -> Mapping[str, str]:
        """Extract string literals assigned to named constants.

        Matches `NAME = "value"` or `NAME = 'value'`, first occurrence wins.

        Args:
            content: Raw aggregator text
            names: Constant names to look up

        Returns:
            Read-only mapping of name to literal value
        """
        values: dict[str, str] = {}
        for name in names:
            match = re.search(rf"\b{re.escape(name)}\s*=\s*[\"']([^\"']+)[\"']", content)
            if match:
                values[name] = match.group(1)
        return MappingProxyType(values)
