# tests/unit/application/processing/test_record_projector.py

"""Tests for projecting table rows onto records"""

# Local imports
from catalog_reconcile.application.processing.record_projector import project_row
from catalog_reconcile.application.processing.record_projector import project_rows
from catalog_reconcile.infrastructure.config._models import OCLC_COLUMNS
from catalog_reconcile.infrastructure.config._models import TIND_COLUMNS

OCLC_ROW = [
    "Books",
    "m",
    "1987",
    "",
    "r",
    "0471018031",
    "",
    "12345",
    "Hydrology Basics",
    "an introduction",
    "Linsley, Ray K.",
    "Wiley",
    "1987",
    "xii, 412 p.",
]


class TestProjectRow:
    """Test single-row projection"""

    def test_oclc_layout(self) -> None:
        """Each column lands in its named field"""
        record = project_row(OCLC_COLUMNS, OCLC_ROW)

        assert record.material_type == "Books"
        assert record.isbn == "0471018031"
        assert record.oclc == "12345"
        assert record.title == "Hydrology Basics"
        assert record.pagination == "xii, 412 p."
        assert record.tind == ""
        assert record.matched_count == 0

    def test_tind_layout(self) -> None:
        """TIND exports carry both identifiers before the ISBN"""
        row = ["Books", "m", "1987", "", "r", "T100", "", "0471018031", "", "Hydrology Basics"]
        row += ["", "", "Wiley", "1987", ""]

        record = project_row(TIND_COLUMNS, row)

        assert record.tind == "T100"
        assert record.oclc == ""
        assert record.isbn == "0471018031"
        assert record.title == "Hydrology Basics"

    def test_column_names_case_and_whitespace_insensitive(self) -> None:
        record = project_row(["  Title ", "OCLC"], ["Hydrology Basics", "999"])

        assert record.title == "Hydrology Basics"
        assert record.oclc == "999"

    def test_unknown_columns_skipped(self) -> None:
        """Columns with no matching field are ignored"""
        record = project_row(["title", "shelf location", "year"], ["A", "Stacks", "1990"])

        assert record.title == "A"
        assert record.year == "1990"

    def test_short_row_leaves_fields_empty(self) -> None:
        """Named columns beyond the end of the row stay empty"""
        record = project_row(OCLC_COLUMNS, ["Books", "m"])

        assert record.material_type == "Books"
        assert record.mono_or_serial == "m"
        assert record.title == ""
        assert record.pagination == ""

    def test_values_not_trimmed(self) -> None:
        record = project_row(["title"], ["  Hydrology  "])

        assert record.title == "  Hydrology  "


class TestProjectRows:
    """Test whole-table projection"""

    def test_skips_header_row(self) -> None:
        table = [OCLC_COLUMNS, OCLC_ROW, OCLC_ROW]

        records = project_rows(OCLC_COLUMNS, table)

        assert len(records) == 2
        assert all(record.title == "Hydrology Basics" for record in records)

    def test_skip_zero_rows(self) -> None:
        records = project_rows(["title"], [["A"], ["B"]], skip_rows=0)

        assert [record.title for record in records] == ["A", "B"]

    def test_header_only_table(self) -> None:
        assert project_rows(OCLC_COLUMNS, [OCLC_COLUMNS]) == []

    def test_file_header_is_not_consulted(self) -> None:
        """The expected column list wins over whatever the file header says"""
        table = [["year", "title"], ["Hydrology Basics", "1987"]]

        records = project_rows(["title", "year"], table)

        assert records[0].title == "Hydrology Basics"
        assert records[0].year == "1987"
