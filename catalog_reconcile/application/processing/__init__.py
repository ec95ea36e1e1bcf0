# catalog_reconcile/application/processing/__init__.py

"""Core processing logic for projection, scoring, and title comparison"""

# Local imports
from catalog_reconcile.application.processing.field_scorer import score_fields
from catalog_reconcile.application.processing.record_projector import project_row
from catalog_reconcile.application.processing.record_projector import project_rows
from catalog_reconcile.application.processing.title_matcher import title_distance
from catalog_reconcile.application.processing.title_matcher import titles_equivalent

__all__: list[str] = [
    "project_row",
    "project_rows",
    "score_fields",
    "title_distance",
    "titles_equivalent",
]
