# catalog_reconcile/shared/__init__.py

"""Shared helpers used across layers"""
