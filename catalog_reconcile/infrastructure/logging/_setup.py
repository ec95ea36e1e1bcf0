# catalog_reconcile/infrastructure/logging/_setup.py

"""Logging configuration and setup for CLI"""

# Standard library imports
from datetime import datetime
from logging import DEBUG
from logging import FileHandler
from logging import Formatter
from logging import INFO
from logging import StreamHandler
from logging import getLevelName
from logging import getLogger
from os import makedirs

# Local imports
from catalog_reconcile.application.models.reconciliation_stats import ReconciliationStats
from catalog_reconcile.infrastructure.persistence import RunIndexManager


def get_default_log_path(log_dir: str = "logs") -> str:
    """Generate default log file path with timestamp and run number"""
    makedirs(log_dir, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_index = RunIndexManager(log_dir).get_next_run_index()

    return f"{log_dir}/reconcile_{timestamp}_run{run_index:03d}.log"


def set_up_logging(
    log_file: str | None = None,
    log_level: str = "INFO",
    silent: bool = False,
    disable_file_logging: bool = False,
) -> str | None:
    """Configure logging for the application

    Args:
        log_file: Path to log file (auto-generated if None and file logging enabled)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        silent: If True, suppress console output
        disable_file_logging: If True, disable file logging

    Returns:
        Path to log file if file logging is enabled, None otherwise
    """
    level = _level_from_name(log_level)

    root_logger = getLogger()
    root_logger.setLevel(DEBUG if not disable_file_logging else level)
    root_logger.handlers = []

    # Console gets the short format, file gets logger names too
    console_formatter = Formatter("%(asctime)s - %(levelname)s - %(message)s")
    file_formatter = Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if not silent:
        console_handler = StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    if not disable_file_logging:
        if log_file is None:
            log_file = get_default_log_path()

        file_handler = FileHandler(log_file)
        file_handler.setLevel(DEBUG)  # Always log debug to file
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

        getLogger(__name__).info(f"Logging to file: {log_file}")
        return log_file

    return None


def _level_from_name(log_level: str) -> int:
    """Map a level name such as ``"DEBUG"`` to its logging constant"""
    level = getLevelName(log_level.upper())
    return level if isinstance(level, int) else INFO


def log_run_summary(
    stats: ReconciliationStats,
    log_file: str | None,
    output_file: str | None = None,
    resume_file: str | None = None,
) -> None:
    """Log final run summary with statistics

    Args:
        stats: Statistics of the finished run
        log_file: Path to log file (if any)
        output_file: Path of the reconciled output, None for stdout
        resume_file: Resume file consulted (if any)
    """
    logger = getLogger(__name__)

    processing_time = stats.processing_time
    minutes = int(processing_time // 60)
    seconds = int(processing_time % 60)
    processed = stats.processed_targets
    records_per_minute = processed / processing_time * 60 if processing_time > 0 else 0

    summary_lines = ["\n" + "=" * 80, "RECONCILIATION COMPLETE", "=" * 80]
    summary_lines.append(f"Target records: {stats.total_targets:,}")
    summary_lines.append(f"Candidate records: {stats.total_candidates:,}")
    if stats.skipped_resumed > 0:
        summary_lines.append(f"Skipped (already reconciled): {stats.skipped_resumed:,}")
    summary_lines.extend(
        [
            f"Targets processed: {processed:,}",
            f"Processing time: {minutes}m {seconds}s",
            f"Processing rate: {records_per_minute:.0f} records/minute",
        ]
    )

    if processed > 0:
        summary_lines.extend(["", "Match Statistics:"])
        for pass_name, count in stats.matches_by_pass.items():
            summary_lines.append(
                f"  Matched ({pass_name} pass): {count:,} ({count / processed * 100:.1f}%)"
            )
        unmatched = stats.unmatched_targets
        summary_lines.append(f"  No match: {unmatched:,} ({unmatched / processed * 100:.1f}%)")
        summary_lines.append(f"  Output lines: {stats.output_lines:,}")

    summary_lines.extend(["", "Output:"])
    summary_lines.append(f"  Results: {output_file or 'stdout'}")
    if resume_file:
        summary_lines.append(f"  Resume file: {resume_file}")
    if log_file:
        summary_lines.append(f"  Log: {log_file}")
    summary_lines.append("=" * 80)

    logger.info("\n".join(summary_lines))
