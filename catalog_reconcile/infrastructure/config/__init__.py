# catalog_reconcile/infrastructure/config/__init__.py

"""Configuration infrastructure for catalog reconciliation.

This module manages configuration loading, validation, and models.
"""

# Local imports
from catalog_reconcile.infrastructure.config._loader import ConfigLoader
from catalog_reconcile.infrastructure.config._loader import get_config
from catalog_reconcile.infrastructure.config._models import AppConfig
from catalog_reconcile.infrastructure.config._models import MatchingConfig
from catalog_reconcile.infrastructure.config._models import SourceConfig
from catalog_reconcile.infrastructure.config._shared_models import DEFAULT_MAX_TITLE_DISTANCE
from catalog_reconcile.infrastructure.config._shared_models import DEFAULT_MIN_AGREEING_FIELDS
from catalog_reconcile.infrastructure.config._shared_models import DEFAULT_PASSES
from catalog_reconcile.infrastructure.config._shared_models import FUZZY_PASS
from catalog_reconcile.infrastructure.config._shared_models import MatchPass
from catalog_reconcile.infrastructure.config._shared_models import STRICT_PASS

__all__ = [
    "AppConfig",
    "ConfigLoader",
    "DEFAULT_MAX_TITLE_DISTANCE",
    "DEFAULT_MIN_AGREEING_FIELDS",
    "DEFAULT_PASSES",
    "FUZZY_PASS",
    "get_config",
    "MatchingConfig",
    "MatchPass",
    "SourceConfig",
    "STRICT_PASS",
]
