"""Domain enumerations."""

from enum import Enum, auto


class Severity(Enum):
    """Finding severity."""

    ERROR = auto()  # result invalid
    WARNING = auto()  # advisory, result stays valid


class FindingCategory(Enum):
    """What kind of inconsistency a finding reports.

    Categories map onto the three-tier error taxonomy:
    - Structural: MISSING_ROOT, MISSING_AGGREGATOR (abort the run)
    - Consistency: DANGLING_EXPORT
    - Advisory: ORPHAN_FILE, MISSING_SENTINEL
    """

    # Structural
    MISSING_ROOT = auto()
    MISSING_AGGREGATOR = auto()

    # Consistency
    DANGLING_EXPORT = auto()

    # Advisory
    ORPHAN_FILE = auto()
    MISSING_SENTINEL = auto()
