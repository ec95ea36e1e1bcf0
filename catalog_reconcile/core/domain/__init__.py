# catalog_reconcile/core/domain/__init__.py

"""Core domain models"""

# Local imports
from catalog_reconcile.core.domain.enums import FillDirection
from catalog_reconcile.core.domain.enums import TargetState
from catalog_reconcile.core.domain.enums import TitleMode
from catalog_reconcile.core.domain.record import COLUMN_FIELDS
from catalog_reconcile.core.domain.record import DESIGNATED_FIELDS
from catalog_reconcile.core.domain.record import IDENTIFIER_FIELDS
from catalog_reconcile.core.domain.record import OUTPUT_HEADER
from catalog_reconcile.core.domain.record import Record

__all__ = [
    "COLUMN_FIELDS",
    "DESIGNATED_FIELDS",
    "FillDirection",
    "IDENTIFIER_FIELDS",
    "OUTPUT_HEADER",
    "Record",
    "TargetState",
    "TitleMode",
]
