# catalog_reconcile/__init__.py

"""Catalog Reconciliation Package

A library for reconciling bibliographic records exported from two library
catalogs, merging OCLC and TIND identifiers into one record set.
"""

# Local imports
from catalog_reconcile.application.models import ReconciliationStats
from catalog_reconcile.application.processing import project_row
from catalog_reconcile.application.processing import project_rows
from catalog_reconcile.application.processing import score_fields
from catalog_reconcile.application.processing import titles_equivalent
from catalog_reconcile.application.processing.matching import RecordMatcher
from catalog_reconcile.application.processing.matching import RecordMerger
from catalog_reconcile.application.processing.matching import Scanner
from catalog_reconcile.application.services import ReconciliationService
from catalog_reconcile.core.domain import FillDirection
from catalog_reconcile.core.domain import Record
from catalog_reconcile.core.domain import TargetState
from catalog_reconcile.core.domain import TitleMode
from catalog_reconcile.infrastructure.config import MatchPass
from catalog_reconcile.infrastructure.persistence import CatalogLoader
from catalog_reconcile.infrastructure.persistence import ResumeIndex

__version__ = "1.0.0"

__all__ = [
    "CatalogLoader",
    "FillDirection",
    "MatchPass",
    "project_row",
    "project_rows",
    "ReconciliationService",
    "ReconciliationStats",
    "Record",
    "RecordMatcher",
    "RecordMerger",
    "ResumeIndex",
    "Scanner",
    "score_fields",
    "TargetState",
    "TitleMode",
    "titles_equivalent",
]
