# catalog_reconcile/application/processing/field_scorer.py

"""Agreement count over the designated descriptive fields"""

# Local imports
from catalog_reconcile.core.domain.record import DESIGNATED_FIELDS
from catalog_reconcile.core.domain.record import Record


def score_fields(first: Record, second: Record) -> int:
    """Count designated fields that are exactly equal in both records

    Comparison is case-sensitive and untrimmed. Identifier fields are not
    scored since they are the values being reconciled.

    Returns:
        Number of agreeing fields, 0 through 9
    """
    return sum(1 for name in DESIGNATED_FIELDS if getattr(first, name) == getattr(second, name))
