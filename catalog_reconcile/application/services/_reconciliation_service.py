# catalog_reconcile/application/services/_reconciliation_service.py

"""Reconciliation service driving the multi-pass matching pipeline.

Every target not already reconciled enters the first pass. Each later pass
only sees the targets the passes before it left unresolved, and whatever
the last pass leaves unresolved is emitted once with a match count of 0.
"""

# Standard library imports
from logging import getLogger
from time import time
from typing import Generator
from typing import Iterator
from typing import Sequence

# Local imports
from catalog_reconcile.application.models.reconciliation_stats import ReconciliationStats
from catalog_reconcile.application.processing.matching._merger import RecordMerger
from catalog_reconcile.application.processing.matching._scanner import Scanner
from catalog_reconcile.core.domain.enums import FillDirection
from catalog_reconcile.core.domain.enums import TargetState
from catalog_reconcile.core.domain.record import Record
from catalog_reconcile.infrastructure.config import ConfigLoader
from catalog_reconcile.infrastructure.config import MatchPass
from catalog_reconcile.infrastructure.logging import ProgressBarManager
from catalog_reconcile.infrastructure.logging import log_phase_header
from catalog_reconcile.infrastructure.persistence import ResumeIndex
from catalog_reconcile.shared.mixins.mixins import ConfigurableMixin

logger = getLogger(__name__)


def _percentage(part: int, whole: int) -> str:
    if whole == 0:
        return "0%"
    return f"{part / whole * 100:3.1f}%"


class ReconciliationService(ConfigurableMixin):
    """Application service reconciling target records against candidates

    Output order is every line of the first pass in target order, then
    every line of the next pass, and finally the unmatched targets.
    """

    __slots__ = (
        "config",
        "passes",
        "fill_direction",
        "resume_index",
        "resume_key_field",
        "progress_interval",
        "scanner",
        "progress",
        "stats",
        "states",
    )

    def __init__(
        self,
        config: ConfigLoader | None = None,
        resume_index: ResumeIndex | None = None,
        passes: Sequence[MatchPass] | None = None,
        fill_direction: FillDirection | None = None,
        min_agreeing_fields: int | None = None,
        progress: ProgressBarManager | None = None,
    ) -> None:
        """Initialize the reconciliation service

        Args:
            config: Configuration loader, default config if None
            resume_index: Identifiers reconciled by earlier runs, None to process all
            passes: Ordered matching passes, configured passes if None
            fill_direction: Merge base side, configured direction if None
            min_agreeing_fields: Field threshold, configured threshold if None
            progress: Progress bar manager, disabled bars if None
        """
        self.config = self._init_config(config)
        matching = self.config.matching

        self.passes = tuple(passes if passes is not None else matching.passes)
        if not self.passes:
            raise ValueError("At least one matching pass is required")

        self.fill_direction = fill_direction or matching.fill_direction
        self.resume_index = resume_index
        self.resume_key_field = self.config.resume.key_field
        self.progress_interval = self.config.processing.progress_interval
        self.scanner = Scanner(
            self.config,
            merger=RecordMerger(self.fill_direction),
            min_agreeing_fields=min_agreeing_fields,
        )
        self.progress = progress or ProgressBarManager(enabled=False)
        self.stats = ReconciliationStats()
        self.states: list[TargetState] = []

    def is_resumed(self, target: Record) -> bool:
        """Whether an earlier run already reconciled this target"""
        if self.resume_index is None:
            return False
        return getattr(target, self.resume_key_field) in self.resume_index

    def reconcile(
        self, targets: Sequence[Record], candidates: Sequence[Record]
    ) -> Iterator[Record]:
        """Reconcile targets against candidates, yielding output records

        Statistics and per-target states are available on ``stats`` and
        ``states`` once the generator is exhausted.

        Args:
            targets: Records being matched, in output order
            candidates: Records every target is compared against

        Yields:
            Merged records of matched targets, then unmatched targets
        """
        start_time = time()
        self.stats = ReconciliationStats(
            total_targets=len(targets), total_candidates=len(candidates)
        )
        self.states = [TargetState.PENDING] * len(targets)

        unresolved: list[int] = []
        for index, target in enumerate(targets):
            if self.is_resumed(target):
                self.states[index] = TargetState.SKIPPED
                self.stats.increment("skipped_resumed")
            else:
                unresolved.append(index)

        if self.stats.skipped_resumed:
            logger.info(
                f"Skipping {self.stats.skipped_resumed:,} targets reconciled in earlier runs"
            )

        for pass_number, match_pass in enumerate(self.passes, start=1):
            if not unresolved:
                break
            log_phase_header(f"PASS {pass_number}: {match_pass.name.upper()} TITLE MATCHING")
            unresolved = yield from self._run_pass(
                match_pass, targets, candidates, unresolved, start_time
            )

        if unresolved:
            logger.info(f"Generating unmatched list ({len(unresolved):,} targets, match count 0)")
        for index in unresolved:
            self.states[index] = TargetState.UNMATCHED
            self.stats.increment("unmatched_targets")
            self.stats.increment("output_lines")
            yield targets[index].with_matched_count(0)

        self.stats.processing_time = time() - start_time
        logger.info(f"Running time {self.stats.processing_time:.1f}s")

    def _run_pass(
        self,
        match_pass: MatchPass,
        targets: Sequence[Record],
        candidates: Sequence[Record],
        pending: list[int],
        start_time: float,
    ) -> Generator[Record, None, list[int]]:
        """Scan each pending target once, yielding its merged matches

        Returns:
            Indexes of targets this pass left unresolved
        """
        unresolved: list[int] = []
        pass_total = len(pending)
        matched_count = 0
        batch_time = time()

        with self.progress.phase_context(
            match_pass.name,
            total=pass_total,
            description=f"{match_pass.name.capitalize()} pass ({pass_total:,} targets)",
        ):
            for processed, index in enumerate(pending, start=1):
                target = targets[index]
                merged = self.scanner.scan(target, candidates, match_pass)
                if merged:
                    matched_count += 1
                    self.states[index] = TargetState.MATCHED
                    self.stats.record_pass_match(match_pass.name)
                    key = getattr(target, self.resume_key_field)
                    if key:
                        self.stats.matched_keys.append(key)
                    self.stats.increment("output_lines", len(merged))
                    yield from merged
                else:
                    unresolved.append(index)

                self.progress.update_task(match_pass.name)
                if processed % self.progress_interval == 0 or processed == pass_total:
                    now = time()
                    logger.info(f"{matched_count:,} matched, {len(unresolved):,} unmatched")
                    logger.info(
                        f"{processed:,}/{pass_total:,} ({_percentage(processed, pass_total)}) "
                        f"targets processed in {match_pass.name} pass, "
                        f"batch time {now - batch_time:.1f}s, running time {now - start_time:.1f}s"
                    )
                    batch_time = now

        return unresolved
