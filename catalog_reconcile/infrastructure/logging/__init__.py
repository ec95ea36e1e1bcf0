# catalog_reconcile/infrastructure/logging/__init__.py

"""Logging infrastructure for catalog reconciliation.

This module provides centralized logging configuration and progress display.
"""

# Local imports
from catalog_reconcile.infrastructure.logging._progress import ProgressBarManager
from catalog_reconcile.infrastructure.logging._progress import log_phase_header
from catalog_reconcile.infrastructure.logging._setup import get_default_log_path
from catalog_reconcile.infrastructure.logging._setup import log_run_summary
from catalog_reconcile.infrastructure.logging._setup import set_up_logging as setup_logging

__all__ = [
    "get_default_log_path",
    "log_phase_header",
    "log_run_summary",
    "ProgressBarManager",
    "setup_logging",
]
