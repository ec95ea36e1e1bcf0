"""
Catalog Reconciliation Tool

Main entry point for reconciling an OCLC catalog export against a TIND
export to merge cross-reference identifiers.

This is a convenience wrapper that calls the main CLI function.
"""

if __name__ == "__main__":
    # Import and run the main CLI function
    # Local imports
    from catalog_reconcile.adapters.cli.main import main

    main()
