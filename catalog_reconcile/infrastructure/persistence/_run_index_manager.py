# catalog_reconcile/infrastructure/persistence/_run_index_manager.py

"""Manager for tracking all reconciliation runs in a master index"""

# Standard library imports
from csv import DictReader
from csv import DictWriter
from fcntl import LOCK_EX
from fcntl import LOCK_UN
from fcntl import flock
from logging import getLogger
from os import makedirs
from os.path import exists
from os.path import join

logger = getLogger(__name__)


class RunIndexManager:
    """Manages the master run index that tracks all tool executions"""

    __slots__ = ("index_path", "fieldnames")

    def __init__(self, log_dir: str = "logs"):
        """Initialize the run index manager

        Args:
            log_dir: Directory where logs and index are stored
        """
        makedirs(log_dir, exist_ok=True)
        self.index_path = join(log_dir, "_run_index.csv")
        self.fieldnames = [
            "run_id",
            "log_file",
            "targets",
            "candidates",
            "output_file",
            "resume_file",
            "passes",
            "fill_direction",
            "min_agreeing_fields",
            "target_count",
            "skipped_resumed",
            "matched_targets",
            "unmatched_targets",
            "output_lines",
            "duration_seconds",
            "status",
        ]

    def _initialize_index(self) -> None:
        """Create the index file with headers if it doesn't exist"""
        if not exists(self.index_path):
            with open(self.index_path, "w", newline="") as f:
                writer = DictWriter(f, fieldnames=self.fieldnames)
                writer.writeheader()

    def add_run(self, run_info: dict[str, str]) -> None:
        """Add a new run entry to the index

        Args:
            run_info: Dictionary containing run information
        """
        self._initialize_index()

        for field in self.fieldnames:
            if field not in run_info:
                run_info[field] = ""

        with open(self.index_path, "a", newline="") as f:
            try:
                flock(f.fileno(), LOCK_EX)

                writer = DictWriter(f, fieldnames=self.fieldnames)
                writer.writerow(run_info)

                logger.debug(f"Added run entry to index: {run_info['run_id']}")

            finally:
                flock(f.fileno(), LOCK_UN)

    def update_run(self, run_id: str, updates: dict[str, str]) -> bool:
        """Update an existing run entry

        Args:
            run_id: Identifier of the run to update
            updates: Dictionary of fields to update

        Returns:
            True if updated successfully
        """
        if not exists(self.index_path):
            logger.warning(f"Run index does not exist: {self.index_path}")
            return False

        rows = []
        updated = False

        with open(self.index_path, "r", newline="") as f:
            reader = DictReader(f)
            for row in reader:
                if row.get("run_id") == run_id:
                    row.update(updates)
                    updated = True
                rows.append(row)

        if updated:
            with open(self.index_path, "w", newline="") as f:
                try:
                    flock(f.fileno(), LOCK_EX)

                    writer = DictWriter(f, fieldnames=self.fieldnames)
                    writer.writeheader()
                    writer.writerows(rows)

                    logger.debug(f"Updated run entry: {run_id}")

                finally:
                    flock(f.fileno(), LOCK_UN)

        return updated

    def get_next_run_index(self) -> int:
        """Get the next sequential run number

        Run numbers are read back from log file names such as
        ``reconcile_20250101_120000_run001.log``.
        """
        if not exists(self.index_path):
            return 1

        max_index = 0
        with open(self.index_path, "r", newline="") as f:
            reader = DictReader(f)
            for row in reader:
                log_file = row.get("log_file") or ""
                if "_run" not in log_file:
                    continue
                run_part = log_file.rsplit("_run", 1)[1].split(".")[0]
                if run_part.isdigit():
                    max_index = max(max_index, int(run_part))

        return max_index + 1
