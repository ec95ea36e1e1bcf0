# tests/unit/infrastructure/logging/test_logging_setup.py

"""Tests for logging setup, run summaries, and progress bars"""

# Standard library imports
from logging import DEBUG
from logging import FileHandler
from logging import INFO
from logging import StreamHandler
from logging import WARNING
from logging import getLogger
from pathlib import Path

# Local imports
from catalog_reconcile.application.models import ReconciliationStats
from catalog_reconcile.infrastructure.logging import ProgressBarManager
from catalog_reconcile.infrastructure.logging import get_default_log_path
from catalog_reconcile.infrastructure.logging import log_run_summary
from catalog_reconcile.infrastructure.logging import setup_logging


class TestSetupLogging:
    """Test handler configuration"""

    def test_console_only(self) -> None:
        result = setup_logging(log_level="WARNING", disable_file_logging=True)

        root_logger = getLogger()
        assert result is None
        assert root_logger.level == WARNING
        assert len(root_logger.handlers) == 1
        assert root_logger.handlers[0].level == WARNING

    def test_silent_with_file(self, tmp_path: Path) -> None:
        log_file = str(tmp_path / "run.log")

        result = setup_logging(log_file=log_file, log_level="INFO", silent=True)
        getLogger("catalog_reconcile.test").debug("debug detail")
        for handler in getLogger().handlers:
            handler.flush()

        root_logger = getLogger()
        assert result == log_file
        assert root_logger.level == DEBUG
        assert [type(handler) for handler in root_logger.handlers] == [FileHandler]
        assert "debug detail" in Path(log_file).read_text()

    def test_console_and_file_levels(self, tmp_path: Path) -> None:
        setup_logging(log_file=str(tmp_path / "run.log"), log_level="INFO")

        handlers = getLogger().handlers
        console = [h for h in handlers if not isinstance(h, FileHandler)]
        files = [h for h in handlers if isinstance(h, FileHandler)]
        assert isinstance(console[0], StreamHandler)
        assert console[0].level == INFO
        assert files[0].level == DEBUG

    def test_unknown_level_falls_back_to_info(self) -> None:
        setup_logging(log_level="chatty", disable_file_logging=True)

        assert getLogger().level == INFO

    def test_default_log_path(self, tmp_path: Path) -> None:
        log_dir = str(tmp_path / "logs")

        path = get_default_log_path(log_dir)

        assert path.startswith(f"{log_dir}/reconcile_")
        assert path.endswith("_run001.log")


class TestRunSummary:
    """Test the final summary"""

    def test_summary_contents(self, caplog) -> None:
        stats = ReconciliationStats(
            total_targets=10,
            total_candidates=20,
            skipped_resumed=2,
            matches_by_pass={"strict": 4, "fuzzy": 2},
            unmatched_targets=2,
            output_lines=9,
            processing_time=65.0,
        )
        caplog.set_level(INFO)

        log_run_summary(stats, None, output_file="out.csv", resume_file="ids.csv")

        text = caplog.text
        assert "Skipped (already reconciled): 2" in text
        assert "Targets processed: 8" in text
        assert "Processing time: 1m 5s" in text
        assert "Matched (strict pass): 4 (50.0%)" in text
        assert "No match: 2 (25.0%)" in text
        assert "Results: out.csv" in text
        assert "Resume file: ids.csv" in text

    def test_summary_without_targets(self, caplog) -> None:
        caplog.set_level(INFO)

        log_run_summary(ReconciliationStats(), "run.log")

        assert "Results: stdout" in caplog.text
        assert "Match Statistics" not in caplog.text
        assert "Log: run.log" in caplog.text


class TestProgressBarManager:
    """Test progress tracking"""

    def test_disabled_manager_logs_descriptions(self, caplog) -> None:
        caplog.set_level(INFO)
        manager = ProgressBarManager(enabled=False)

        with manager.phase_context("strict", total=3, description="Strict pass (3 targets)"):
            manager.update_task("strict")

        assert manager.progress is None
        assert "Strict pass (3 targets)" in caplog.text

    def test_enabled_manager_tracks_task(self) -> None:
        manager = ProgressBarManager(enabled=True)

        with manager.phase_context("strict", total=4, description="Strict pass"):
            manager.update_task("strict", advance=2)
            task = manager.progress.tasks[manager.tasks["strict"]]
            assert task.completed == 2

        assert task.completed == 4
