# catalog_reconcile/infrastructure/persistence/_catalog_loader.py

"""CSV loader for catalog exports"""

# Standard library imports
from csv import reader
from logging import getLogger
from pathlib import Path

# Local imports
from catalog_reconcile.application.processing.record_projector import project_rows
from catalog_reconcile.core.domain.record import Record
from catalog_reconcile.infrastructure.config import SourceConfig

logger = getLogger(__name__)


def read_table(path: Path | str) -> list[list[str]]:
    """Read a whole CSV file into rows of text

    Parsing is strict: bad quoting raises ``csv.Error``, and a row whose
    field count differs from the first row raises ``ValueError``.

    Args:
        path: CSV file to read

    Returns:
        All rows, header rows included
    """
    table: list[list[str]] = []
    expected_fields: int | None = None

    with open(path, "r", encoding="utf-8", newline="") as file:
        csv_reader = reader(file, strict=True)
        for row in csv_reader:
            if expected_fields is None:
                expected_fields = len(row)
            elif len(row) != expected_fields:
                raise ValueError(
                    f"{path}: record on line {csv_reader.line_num} has {len(row)} fields, "
                    f"expected {expected_fields}"
                )
            table.append(row)

    return table


class CatalogLoader:
    """Loads one catalog export as records"""

    __slots__ = ("path", "source")

    def __init__(self, path: Path | str, source: SourceConfig) -> None:
        """Initialize the loader

        Args:
            path: CSV export to load
            source: Expected column layout and header rows of the export
        """
        self.path = Path(path)
        self.source = source

    def load_records(self) -> list[Record]:
        """Read the export and project its data rows

        Returns:
            Records in file order
        """
        table = read_table(self.path)
        logger.info(f"Read in {self.path}: {len(table):,} rows")

        records = project_rows(self.source.columns, table, skip_rows=self.source.skip_rows)
        logger.info(f"{self.path.name}: {len(records):,} records")
        return records
