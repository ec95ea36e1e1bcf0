# catalog_reconcile/adapters/cli/__init__.py

"""CLI adapter for catalog reconciliation"""

# Local imports
from catalog_reconcile.adapters.cli.main import main
from catalog_reconcile.adapters.cli.parser import build_run_config
from catalog_reconcile.adapters.cli.parser import create_argument_parser

__all__ = ["build_run_config", "create_argument_parser", "main"]
