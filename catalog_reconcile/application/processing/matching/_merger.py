# catalog_reconcile/application/processing/matching/_merger.py

"""Merging of matched record pairs"""

# Local imports
from catalog_reconcile.core.domain.enums import FillDirection
from catalog_reconcile.core.domain.record import IDENTIFIER_FIELDS
from catalog_reconcile.core.domain.record import Record


class RecordMerger:
    """Builds the merged output record for a matched pair

    The fill direction picks the base record. The other record only fills
    identifier fields that are empty on the base; a populated identifier on
    the base is never overwritten. Neither input is modified.
    """

    __slots__ = ("fill_direction",)

    def __init__(self, fill_direction: FillDirection = FillDirection.SOURCE_PREFERRED) -> None:
        self.fill_direction = fill_direction

    def merge(self, target: Record, candidate: Record) -> Record:
        """Merge a matched target and candidate into a new record"""
        if self.fill_direction is FillDirection.TARGET_PREFERRED:
            base, donor = target, candidate
        else:
            base, donor = candidate, target

        updates = {
            name: getattr(donor, name)
            for name in IDENTIFIER_FIELDS
            if not getattr(base, name) and getattr(donor, name)
        }
        if not updates:
            return base
        return base.model_copy(update=updates)
