# catalog_reconcile/adapters/exporters/csv_exporter.py

"""CSV output of reconciled records"""

# Standard library imports
from csv import QUOTE_NONNUMERIC
from csv import writer
from typing import Iterable
from typing import TextIO

# Local imports
from catalog_reconcile.core.domain.record import OUTPUT_HEADER
from catalog_reconcile.core.domain.record import Record


class RecordCSVWriter:
    """Writes reconciled records as CSV lines

    The header line is written bare. Every record line quotes each text
    field and leaves the trailing match count as an unquoted integer.
    """

    __slots__ = ("stream", "csv_writer", "lines_written")

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self.csv_writer = writer(stream, quoting=QUOTE_NONNUMERIC, lineterminator="\n")
        self.lines_written = 0

    def write_header(self) -> None:
        """Write the column header line"""
        self.stream.write(",".join(OUTPUT_HEADER) + "\n")

    def write(self, record: Record) -> None:
        """Write one record line"""
        self.csv_writer.writerow(record.to_row())
        self.lines_written += 1

    def write_all(self, records: Iterable[Record]) -> int:
        """Write every record from an iterable, returning the number written"""
        written = 0
        for record in records:
            self.write(record)
            written += 1
        return written
