# catalog_reconcile/application/processing/matching/_scanner.py

"""Scan of one target against the full candidate set"""

# Standard library imports
from logging import getLogger
from typing import Sequence

# Local imports
from catalog_reconcile.application.processing.matching._matcher import RecordMatcher
from catalog_reconcile.application.processing.matching._merger import RecordMerger
from catalog_reconcile.core.domain.record import Record
from catalog_reconcile.infrastructure.config import ConfigLoader
from catalog_reconcile.infrastructure.config import MatchPass
from catalog_reconcile.shared.mixins.mixins import ConfigurableMixin

logger = getLogger(__name__)


class Scanner(ConfigurableMixin):
    """Finds and merges every candidate matching a target in a pass"""

    def __init__(
        self,
        config: ConfigLoader | None = None,
        merger: RecordMerger | None = None,
        min_agreeing_fields: int | None = None,
        max_title_distance: int | None = None,
    ) -> None:
        """Initialize the scanner

        Args:
            config: Configuration loader, default config if None
            merger: Merger for matched pairs, built from config if None
            min_agreeing_fields: Overrides the configured field threshold
            max_title_distance: Overrides the configured fuzzy title bound
        """
        self.config = self._init_config(config)
        matching = self.config.matching

        self.merger = merger or RecordMerger(matching.fill_direction)
        self.min_agreeing_fields = (
            min_agreeing_fields
            if min_agreeing_fields is not None
            else matching.min_agreeing_fields
        )
        self.max_title_distance = (
            max_title_distance if max_title_distance is not None else matching.max_title_distance
        )
        self._matchers: dict[MatchPass, RecordMatcher] = {}

    def matcher_for(self, match_pass: MatchPass) -> RecordMatcher:
        """Matcher configured for a pass, built once per pass"""
        matcher = self._matchers.get(match_pass)
        if matcher is None:
            matcher = RecordMatcher(
                match_pass.title_modes, self.min_agreeing_fields, self.max_title_distance
            )
            self._matchers[match_pass] = matcher
        return matcher

    def scan(
        self, target: Record, candidates: Sequence[Record], match_pass: MatchPass
    ) -> list[Record]:
        """Merge every candidate that matches the target

        Each merged record carries the total number of matches found for
        the target in this pass. Matches are not deduplicated, so three
        matching candidates give three records each counting 3.

        Args:
            target: Record being matched
            candidates: Full candidate set
            match_pass: Pass whose title modes apply

        Returns:
            Merged records, empty when nothing matched
        """
        matcher = self.matcher_for(match_pass)
        merged = [
            self.merger.merge(target, candidate)
            for candidate in candidates
            if matcher.matches(target, candidate)
        ]
        if not merged:
            return []

        match_count = len(merged)
        logger.debug(f"Found {match_count} matches for {target.title!r} in {match_pass.name} pass")
        return [record.with_matched_count(match_count) for record in merged]
