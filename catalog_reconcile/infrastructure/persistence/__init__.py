# catalog_reconcile/infrastructure/persistence/__init__.py

"""Persistence infrastructure for data loading and storage.

This module provides the catalog export loader, the resume index, and the
run index.
"""

# Local imports
from catalog_reconcile.infrastructure.persistence._catalog_loader import CatalogLoader
from catalog_reconcile.infrastructure.persistence._catalog_loader import read_table
from catalog_reconcile.infrastructure.persistence._resume_index import ResumeIndex
from catalog_reconcile.infrastructure.persistence._run_index_manager import RunIndexManager

__all__ = ["CatalogLoader", "read_table", "ResumeIndex", "RunIndexManager"]
