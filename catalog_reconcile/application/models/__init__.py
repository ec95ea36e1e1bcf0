# catalog_reconcile/application/models/__init__.py

"""Application-level models for reporting and orchestration"""

# Local imports
from catalog_reconcile.application.models.reconciliation_stats import ReconciliationStats

__all__ = ["ReconciliationStats"]
