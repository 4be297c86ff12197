"""
Core domain layer: cell model, dataset store, change history, notifier,
transformations, statistics, chart view base class and the view registry
"""

from .cells import CellKind, cell_kind
from .chart_state import ChartState
from .dataset import DatasetStore
from .history import ChangeHistory
from .notifier import ChangeNotifier, Subscription
from .statistics import ColumnStats, basic_stats
from .transformations import (
    AggregationType,
    Transformation,
    make_aggregation,
    make_filter,
    make_sort,
)
from .base_view import BaseView
from .view_registry import ViewRegistry

__all__ = [
    "CellKind",
    "cell_kind",
    "ChartState",
    "DatasetStore",
    "ChangeHistory",
    "ChangeNotifier",
    "Subscription",
    "ColumnStats",
    "basic_stats",
    "AggregationType",
    "Transformation",
    "make_aggregation",
    "make_filter",
    "make_sort",
    "BaseView",
    "ViewRegistry",
]
