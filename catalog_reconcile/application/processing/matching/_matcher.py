# catalog_reconcile/application/processing/matching/_matcher.py

"""Match decision for a target/candidate pair within one pass"""

# Standard library imports
from typing import Sequence

# Local imports
from catalog_reconcile.application.processing.field_scorer import score_fields
from catalog_reconcile.application.processing.title_matcher import titles_equivalent
from catalog_reconcile.core.domain.enums import TitleMode
from catalog_reconcile.core.domain.record import DESIGNATED_FIELDS
from catalog_reconcile.core.domain.record import Record
from catalog_reconcile.infrastructure.config import DEFAULT_MAX_TITLE_DISTANCE
from catalog_reconcile.infrastructure.config import DEFAULT_MIN_AGREEING_FIELDS


class RecordMatcher:
    """Combines field agreement and title equivalence into a match decision

    A pair matches when at least ``min_agreeing_fields`` designated fields
    agree and the titles are equivalent under any of the title modes.
    """

    __slots__ = ("title_modes", "min_agreeing_fields", "max_title_distance")

    def __init__(
        self,
        title_modes: Sequence[TitleMode],
        min_agreeing_fields: int = DEFAULT_MIN_AGREEING_FIELDS,
        max_title_distance: int = DEFAULT_MAX_TITLE_DISTANCE,
    ) -> None:
        if not title_modes:
            raise ValueError("At least one title mode is required")
        if not 0 <= min_agreeing_fields <= len(DESIGNATED_FIELDS):
            raise ValueError(
                f"min_agreeing_fields must be between 0 and {len(DESIGNATED_FIELDS)}, "
                f"got {min_agreeing_fields}"
            )
        self.title_modes = tuple(title_modes)
        self.min_agreeing_fields = min_agreeing_fields
        self.max_title_distance = max_title_distance

    def matches(self, target: Record, candidate: Record) -> bool:
        """Whether the candidate matches the target under this pass's rules"""
        # Field agreement first: it is cheap and fuzzy title comparison is not
        if score_fields(target, candidate) < self.min_agreeing_fields:
            return False
        return any(
            titles_equivalent(target.title, candidate.title, mode, self.max_title_distance)
            for mode in self.title_modes
        )
