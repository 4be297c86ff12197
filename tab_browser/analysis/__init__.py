"""
Column analysis helpers that read rows but never mutate a dataset.
"""

from .correlation import pearson_correlation
from .summary import ColumnSummary, summarise_column, summarise_columns

__all__ = ["pearson_correlation", "ColumnSummary", "summarise_column", "summarise_columns"]
