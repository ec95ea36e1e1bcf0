# tests/adapters/exporters/test_record_csv_writer.py

"""Tests for CSV output of reconciled records"""

# Standard library imports
from io import StringIO

# Local imports
from catalog_reconcile.adapters.exporters import RecordCSVWriter
from catalog_reconcile.core.domain.record import Record

HEADER_LINE = (
    "material type,mono or serial,date1,date2,form,tind,OCLC,ISBN,ISSN,"
    "title,subtitle,author,publisher,year,pagination,matched count\n"
)


class TestRecordCSVWriter:
    """Test output line formatting"""

    def test_header_is_bare(self) -> None:
        stream = StringIO()

        RecordCSVWriter(stream).write_header()

        assert stream.getvalue() == HEADER_LINE

    def test_text_quoted_count_bare(self) -> None:
        stream = StringIO()
        record = Record(
            material_type="Books", tind="T1", oclc="555", title="Hydrology", matched_count=2
        )

        RecordCSVWriter(stream).write(record)

        assert stream.getvalue() == (
            '"Books","","","","","T1","555","","","Hydrology","","","","","",2\n'
        )

    def test_embedded_quotes_and_commas(self) -> None:
        stream = StringIO()
        record = Record(title='Say "hi"', author="Linsley, Ray K.")

        RecordCSVWriter(stream).write(record)

        line = stream.getvalue()
        assert '"Say ""hi"""' in line
        assert '"Linsley, Ray K."' in line
        assert line.endswith(",0\n")

    def test_write_all_counts_lines(self) -> None:
        stream = StringIO()
        writer = RecordCSVWriter(stream)

        written = writer.write_all(Record(oclc=str(n)) for n in range(3))

        assert written == 3
        assert writer.lines_written == 3
        assert stream.getvalue().count("\n") == 3
