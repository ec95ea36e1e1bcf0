# catalog_reconcile/application/processing/record_projector.py

"""Projection of raw table rows onto catalog records"""

# Standard library imports
from typing import Iterable
from typing import Sequence

# Local imports
from catalog_reconcile.core.domain.record import COLUMN_FIELDS
from catalog_reconcile.core.domain.record import Record


def project_row(columns: Sequence[str], row: Sequence[str]) -> Record:
    """Build a Record from a row using the source's expected column order

    The column list describes the export layout, independent of whatever
    header the file itself carries. Unrecognized column names are skipped,
    and recognized names with no value in the row stay empty.

    Args:
        columns: Expected column names, in file order
        row: Text values of one table row

    Returns:
        Projected record
    """
    values: dict[str, str] = {}
    for position, column in enumerate(columns):
        field = COLUMN_FIELDS.get(column.strip().lower())
        if field is None or position >= len(row):
            continue
        values[field] = row[position]
    return Record(**values)


def project_rows(
    columns: Sequence[str], rows: Iterable[Sequence[str]], skip_rows: int = 1
) -> list[Record]:
    """Project every data row of a table, skipping its leading header rows

    Args:
        columns: Expected column names, in file order
        rows: All rows of the table, headers included
        skip_rows: Number of leading rows that are never projected

    Returns:
        Records in table order
    """
    records = []
    for row_number, row in enumerate(rows):
        if row_number < skip_rows:
            continue
        records.append(project_row(columns, row))
    return records
