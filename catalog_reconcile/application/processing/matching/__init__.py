# catalog_reconcile/application/processing/matching/__init__.py

"""Matching module for pairing target and candidate records"""

# Local imports
from catalog_reconcile.application.processing.matching._matcher import RecordMatcher
from catalog_reconcile.application.processing.matching._merger import RecordMerger
from catalog_reconcile.application.processing.matching._scanner import Scanner

__all__ = ["RecordMatcher", "RecordMerger", "Scanner"]
