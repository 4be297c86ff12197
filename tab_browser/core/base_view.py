from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Tuple

import pandas as pd
import plotly.graph_objs as go

from .cells import is_numeric
from .chart_state import ChartState
from .dataset import DatasetStore


class BaseView(ABC):
    """
    Abstract base class for all chart views.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally and as ChartState.chart_type
    - expose a 'label' - used for UI/human-readable applications
    - implement 'compute_data' - used to compute the data given the current ChartState
    - implement 'render_figure' - used to render the figure using Plotly
    """

    id: str = None
    label: str = None

    def __init__(self, store: DatasetStore):
        self.store = store


    @abstractmethod
    def compute_data(self, state: ChartState) -> pd.DataFrame:
        """
        Compute the data given the current ChartState
        :param state: the current {@link ChartState} - which columns the user picked
        :return: data: a dataframe with the plotted values
        """
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: pd.DataFrame, state: ChartState) -> go.Figure:
        """
        Render the figure given the computed data
        :param data: the data provided by {@link compute_data()}
        :param state: the current {@link ChartState}
        :return: the Plotly figure for these parameters
        """
        raise NotImplementedError()


    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    def numeric_pairs(self, x_column: str, y_column: str) -> List[Tuple[float, float]]:
        """
        (x, y) pairs from rows where both cells are numeric, in row order.

        Every x/y view goes through here so the 'numeric only' rule lives in one place.
        """
        pairs = []
        for row in self.store.get_data():
            x, y = row.get(x_column), row.get(y_column)
            if is_numeric(x) and is_numeric(y):
                pairs.append((float(x), float(y)))
        return pairs

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig
