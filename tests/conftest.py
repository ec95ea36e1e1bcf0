# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from csv import writer
from logging import getLogger
from pathlib import Path
from typing import Callable

# Third party imports
import pytest

# Local imports
from catalog_reconcile.core.domain.record import Record
from catalog_reconcile.infrastructure.config import AppConfig
from catalog_reconcile.infrastructure.config import ConfigLoader
import catalog_reconcile.infrastructure.config._loader as config_loader_module

# Values shared by every designated field of the default test record
BASE_RECORD_VALUES = {
    "material_type": "Books",
    "mono_or_serial": "m",
    "date1": "1987",
    "date2": "",
    "form": "r",
    "isbn": "0471018031",
    "issn": "",
    "title": "Hydrology Basics",
    "subtitle": "an introduction",
    "author": "Linsley, Ray K.",
    "publisher": "Wiley",
    "year": "1987",
    "pagination": "xii, 412 p.",
}


@pytest.fixture(autouse=True, scope="function")
def basic_isolation():
    """Minimal isolation for most tests - reset logging and default config"""
    root_logger = getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(30)  # WARNING level

    config_loader_module._default_config = None

    yield

    config_loader_module._default_config = None


@pytest.fixture
def make_record() -> Callable[..., Record]:
    """Factory for records with sensible bibliographic defaults"""

    def _make_record(**overrides: str | int) -> Record:
        values: dict[str, str | int] = dict(BASE_RECORD_VALUES)
        values.update(overrides)
        return Record(**values)

    return _make_record


@pytest.fixture
def default_config() -> ConfigLoader:
    """Configuration with every default, independent of the working directory"""
    return ConfigLoader(app_config=AppConfig())


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[str, list[list[str]]], Path]:
    """Write rows to a CSV file under the test's temporary directory"""

    def _write_csv(name: str, rows: list[list[str]]) -> Path:
        path = tmp_path / name
        with open(path, "w", encoding="utf-8", newline="") as f:
            writer(f).writerows(rows)
        return path

    return _write_csv
