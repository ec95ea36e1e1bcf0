# catalog_reconcile/adapters/exporters/__init__.py

"""Exporters for reconciled records"""

# Local imports
from catalog_reconcile.adapters.exporters.csv_exporter import RecordCSVWriter

__all__ = ["RecordCSVWriter"]
