# catalog_reconcile/core/__init__.py

"""Core domain layer for catalog reconciliation"""
