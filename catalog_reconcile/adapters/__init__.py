# catalog_reconcile/adapters/__init__.py

"""Adapters exposing the reconciliation engine: CLI and exporters"""
