# catalog_reconcile/infrastructure/config/_loader.py

"""Main configuration loader using Pydantic models"""

# Standard library imports
from logging import getLogger

# Local imports
from catalog_reconcile.infrastructure.config._models import AppConfig
from catalog_reconcile.infrastructure.config._models import LoggingConfig
from catalog_reconcile.infrastructure.config._models import MatchingConfig
from catalog_reconcile.infrastructure.config._models import ProcessingConfig
from catalog_reconcile.infrastructure.config._models import ResumeConfig
from catalog_reconcile.infrastructure.config._models import SourceConfig

logger = getLogger(__name__)


class ConfigLoader:
    """Configuration loader giving typed access to each config section"""

    def __init__(self, config_path: str | None = None, app_config: AppConfig | None = None):
        """Initialize configuration loader

        Args:
            config_path: Path to JSON configuration file, None for auto-detection
            app_config: Already-built configuration, skips file loading
        """
        self.config_path = config_path
        self._app_config = app_config if app_config is not None else AppConfig.load(config_path)

    @property
    def app_config(self) -> AppConfig:
        """Root configuration model"""
        return self._app_config

    @property
    def target_source(self) -> SourceConfig:
        """Layout of the target (OCLC) export"""
        return self._app_config.sources.target

    @property
    def candidate_source(self) -> SourceConfig:
        """Layout of the candidate (TIND) export"""
        return self._app_config.sources.candidate

    @property
    def matching(self) -> MatchingConfig:
        """Matching configuration"""
        return self._app_config.matching

    @property
    def resume(self) -> ResumeConfig:
        """Resume index configuration"""
        return self._app_config.resume

    @property
    def processing(self) -> ProcessingConfig:
        """Processing configuration"""
        return self._app_config.processing

    @property
    def logging(self) -> LoggingConfig:
        """Logging configuration"""
        return self._app_config.logging


# Global default instance
_default_config: ConfigLoader | None = None


def get_config(config_path: str | None = None) -> ConfigLoader:
    """Get configuration loader instance

    Args:
        config_path: Path to configuration file, None for default

    Returns:
        ConfigLoader instance
    """
    global _default_config

    if config_path:
        return ConfigLoader(config_path)

    if _default_config is None:
        _default_config = ConfigLoader(None)

    return _default_config
