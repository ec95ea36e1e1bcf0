#!/usr/bin/env python3
"""
Catalog Reconciliation Tool - Main Entry Point

This module allows the package to be run as a script:
    python -m catalog_reconcile
"""

# Local imports
from catalog_reconcile.adapters.cli.main import main

if __name__ == "__main__":
    main()
