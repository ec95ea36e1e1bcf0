# catalog_reconcile/application/__init__.py

"""Application layer: matching engine and reconciliation service"""
