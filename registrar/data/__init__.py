"""
Record storage.

This package holds the in-memory entity directory and the CSV file layer.
"""

from .directory import EntityDirectory
from .csv_store import CsvStore

__all__ = ["EntityDirectory", "CsvStore"]
