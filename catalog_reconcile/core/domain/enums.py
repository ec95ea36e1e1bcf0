# catalog_reconcile/core/domain/enums.py

"""Domain enumerations for catalog reconciliation"""

# Standard library imports
from enum import Enum


class TitleMode(Enum):
    """How two titles are compared for equivalence"""

    EXACT = "exact"  # Raw string equality
    TRIMMED = "trimmed"  # Equality after stripping surrounding whitespace
    FUZZY = "fuzzy"  # Case-insensitive bounded Levenshtein distance


class FillDirection(Enum):
    """Which side of a matched pair survives as the merged row

    The other side only contributes identifiers the surviving row is missing.
    """

    TARGET_PREFERRED = "target_preferred"
    SOURCE_PREFERRED = "source_preferred"


class TargetState(Enum):
    """Lifecycle of a target record through the reconciliation passes"""

    PENDING = "pending"  # Not yet attempted in any pass
    SKIPPED = "skipped"  # Already reconciled in an earlier run
    MATCHED = "matched"  # Matched in some pass, lines emitted
    UNMATCHED = "unmatched"  # No pass matched, emitted with count 0
