# catalog_reconcile/application/services/__init__.py

"""Application services for orchestration.

This module provides the service layer that drives reconciliation runs
across the matching components.
"""

# Local imports
from catalog_reconcile.application.services._reconciliation_service import (
    ReconciliationService,
)

__all__ = ["ReconciliationService"]
