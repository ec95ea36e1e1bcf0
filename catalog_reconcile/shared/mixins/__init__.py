# catalog_reconcile/shared/mixins/__init__.py

"""Shared mixins"""

# Local imports
from catalog_reconcile.shared.mixins.mixins import ConfigurableMixin

__all__ = ["ConfigurableMixin"]
