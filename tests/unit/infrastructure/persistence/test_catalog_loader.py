# tests/unit/infrastructure/persistence/test_catalog_loader.py

"""Tests for reading catalog exports"""

# Standard library imports
from csv import Error as CSVError
from pathlib import Path

# Third party imports
import pytest

# Local imports
from catalog_reconcile.infrastructure.config import SourceConfig
from catalog_reconcile.infrastructure.persistence import CatalogLoader
from catalog_reconcile.infrastructure.persistence import read_table


class TestReadTable:
    """Test strict CSV reading"""

    def test_reads_all_rows(self, write_csv) -> None:
        path = write_csv("t.csv", [["title", "year"], ["A, B", "1990"], ['Say "hi"', ""]])

        table = read_table(path)

        assert table == [["title", "year"], ["A, B", "1990"], ['Say "hi"', ""]]

    def test_inconsistent_field_count(self, write_csv) -> None:
        path = write_csv("t.csv", [["title", "year"], ["A", "1990", "extra"]])

        with pytest.raises(ValueError, match="line 2 has 3 fields, expected 2"):
            read_table(path)

    def test_malformed_quoting(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.csv"
        path.write_text('title,year\n"A"x,1990\n', encoding="utf-8")

        with pytest.raises(CSVError):
            read_table(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            read_table(tmp_path / "missing.csv")

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")

        assert read_table(path) == []


class TestCatalogLoader:
    """Test loading records from an export"""

    def test_load_records(self, write_csv) -> None:
        path = write_csv(
            "tind.csv",
            [["Title", "TIND", "Year"], ["Hydrology", "T1", "1987"], ["Geology", "T2", "1990"]],
        )
        source = SourceConfig(columns=["title", "tind", "year"])

        records = CatalogLoader(path, source).load_records()

        assert [record.tind for record in records] == ["T1", "T2"]
        assert records[0].title == "Hydrology"
        assert records[1].year == "1990"

    def test_skip_rows(self, write_csv) -> None:
        path = write_csv("oclc.csv", [["Export"], ["title"], ["Hydrology"]])

        records = CatalogLoader(path, SourceConfig(columns=["title"], skip_rows=2)).load_records()

        assert [record.title for record in records] == ["Hydrology"]
