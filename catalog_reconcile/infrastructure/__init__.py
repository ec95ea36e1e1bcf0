# catalog_reconcile/infrastructure/__init__.py

"""System infrastructure components for configuration and persistence.

This module provides infrastructure services including configuration
management, catalog loading, and run bookkeeping.
"""

# Local imports
from catalog_reconcile.infrastructure.config import ConfigLoader
from catalog_reconcile.infrastructure.persistence import CatalogLoader
from catalog_reconcile.infrastructure.persistence import ResumeIndex
from catalog_reconcile.infrastructure.persistence import RunIndexManager

__all__ = ["CatalogLoader", "ConfigLoader", "ResumeIndex", "RunIndexManager"]
