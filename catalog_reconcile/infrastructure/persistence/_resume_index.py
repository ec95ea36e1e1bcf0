# catalog_reconcile/infrastructure/persistence/_resume_index.py

"""Identifiers already reconciled by earlier runs"""

# Standard library imports
from fcntl import LOCK_EX
from fcntl import LOCK_UN
from fcntl import flock
from logging import getLogger
from pathlib import Path
from typing import Iterable

logger = getLogger(__name__)


class ResumeIndex:
    """Set of identifiers resolved in a previous run

    Built once before a run and handed to the reconciliation service.
    Targets whose key is in the index are left out of the run entirely.
    """

    __slots__ = ("_identifiers",)

    def __init__(self, identifiers: Iterable[str] = ()) -> None:
        self._identifiers: set[str] = set()
        for identifier in identifiers:
            self.add(identifier)

    @classmethod
    def load(cls, path: Path | str) -> "ResumeIndex":
        """Load a newline-delimited identifier file

        Lines are trimmed and blank lines ignored.

        Args:
            path: Resume file to read

        Returns:
            Index holding every identifier in the file
        """
        with open(path, "r", encoding="utf-8") as f:
            index = cls(line for line in f)
        logger.info(f"Previously processed IDs: {len(index):,}")
        return index

    def add(self, identifier: str) -> None:
        """Add an identifier, ignoring blanks"""
        identifier = identifier.strip()
        if identifier:
            self._identifiers.add(identifier)

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and bool(identifier) and identifier in self._identifiers

    def __len__(self) -> int:
        return len(self._identifiers)

    @staticmethod
    def append_to(path: Path | str, identifiers: Iterable[str]) -> int:
        """Append newly resolved identifiers to a resume file

        Args:
            path: Resume file, created if missing
            identifiers: Identifiers to record; blanks are skipped

        Returns:
            Number of identifiers written
        """
        lines = [f"{identifier.strip()}\n" for identifier in identifiers if identifier.strip()]
        if not lines:
            return 0

        # Use file locking to handle concurrent writes
        with open(path, "a", encoding="utf-8") as f:
            try:
                flock(f.fileno(), LOCK_EX)
                f.writelines(lines)
            finally:
                flock(f.fileno(), LOCK_UN)

        logger.info(f"Recorded {len(lines):,} resolved IDs in {path}")
        return len(lines)
