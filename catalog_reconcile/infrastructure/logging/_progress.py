# catalog_reconcile/infrastructure/logging/_progress.py

"""Progress bar management for CLI output"""

# Standard library imports
from contextlib import contextmanager
from logging import getLogger
from typing import Any
from typing import Iterator

# Third party imports
from rich.console import Console
from rich.progress import BarColumn
from rich.progress import MofNCompleteColumn
from rich.progress import Progress
from rich.progress import SpinnerColumn
from rich.progress import TaskID
from rich.progress import TextColumn
from rich.progress import TimeElapsedColumn
from rich.progress import TimeRemainingColumn

logger = getLogger(__name__)


def log_phase_header(phase_name: str) -> None:
    """Log a phase header such as ``PASS 1: STRICT TITLE MATCHING``"""
    separator = "=" * 80
    logger.info(separator)
    logger.info(f"=== {phase_name} ===")
    logger.info(separator)


class ProgressBarManager:
    """Manages progress bars for the reconciliation passes

    Bars render on stderr so reconciled records can stream to stdout.
    """

    def __init__(self, enabled: bool = True) -> None:
        """Initialize progress bar manager

        Args:
            enabled: Whether to show progress bars
        """
        self.enabled = enabled
        self.progress: Progress | None = None
        self.console: Console | None = None
        self.tasks: dict[str, TaskID] = {}

        if self.enabled:
            self.console = Console(stderr=True)
            self.progress = Progress(
                SpinnerColumn(),
                TextColumn("[bold blue]{task.description}"),
                BarColumn(),
                MofNCompleteColumn(),
                TimeElapsedColumn(),
                TimeRemainingColumn(),
                console=self.console,
                expand=False,
            )

    def start(self) -> None:
        """Start the progress display"""
        if self.enabled and self.progress:
            self.progress.start()

    def stop(self) -> None:
        """Stop the progress display"""
        if self.enabled and self.progress:
            self.progress.stop()

    def create_phase_task(
        self, phase_name: str, total: int | None = None, description: str | None = None
    ) -> TaskID | None:
        """Create a new progress task for a processing phase

        Args:
            phase_name: Name of the phase (used as key)
            total: Total number of items to process
            description: Description to display

        Returns:
            Task ID if progress bars are enabled, None otherwise
        """
        if not self.enabled or not self.progress:
            if description:
                logger.info(description)
            return None

        task_id = self.progress.add_task(description or phase_name, total=total)
        self.tasks[phase_name] = task_id
        return task_id

    def update_task(
        self,
        phase_name: str,
        advance: int = 1,
        description: str | None = None,
    ) -> None:
        """Update progress for a task

        Args:
            phase_name: Name of the phase to update
            advance: Number of items to advance by
            description: Update the description
        """
        if not self.enabled or not self.progress or phase_name not in self.tasks:
            return

        task_id = self.tasks[phase_name]
        update_kwargs: dict[str, Any] = {}
        if description is not None:
            update_kwargs["description"] = description
        if advance > 0:
            update_kwargs["advance"] = advance

        if update_kwargs:
            self.progress.update(task_id, **update_kwargs)

    def complete_task(self, phase_name: str, message: str | None = None) -> None:
        """Mark a task as complete

        Args:
            phase_name: Name of the phase to complete
            message: Optional completion message
        """
        if not self.enabled or not self.progress or phase_name not in self.tasks:
            if message:
                logger.info(message)
            return

        task_id = self.tasks[phase_name]
        task = self.progress.tasks[task_id]
        self.progress.update(task_id, completed=task.total)

        if message and self.console:
            self.console.print(f"[green]✓[/green] {message}")

    @contextmanager
    def phase_context(
        self, phase_name: str, total: int | None = None, description: str | None = None
    ) -> Iterator[None]:
        """Context manager for a processing phase

        Args:
            phase_name: Name of the phase
            total: Total items to process
            description: Phase description
        """
        self.create_phase_task(phase_name, total, description)

        try:
            yield
        finally:
            self.complete_task(phase_name)
