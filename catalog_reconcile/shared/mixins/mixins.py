# catalog_reconcile/shared/mixins/mixins.py

"""Common mixins for reducing code duplication across classes

Current mixins:
- ConfigurableMixin: standardized config access for the matching components
  and the reconciliation service
"""

# Local imports
from catalog_reconcile.infrastructure.config import ConfigLoader
from catalog_reconcile.infrastructure.config import get_config


class ConfigurableMixin:
    """Mixin for classes that need configuration access

    Provides the config initialization pattern used across:
    - Scanner
    - ReconciliationService
    """

    def _init_config(self, config: ConfigLoader | None = None) -> ConfigLoader:
        """Initialize configuration, using default if not provided

        Args:
            config: Optional ConfigLoader instance

        Returns:
            ConfigLoader instance (provided or default)
        """
        if config is None:
            config = get_config()
        return config
