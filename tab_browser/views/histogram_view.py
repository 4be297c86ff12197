from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from tab_browser.core.base_view import BaseView
from tab_browser.core.chart_state import ChartState
from tab_browser.core.statistics import numeric_values


class HistogramView(BaseView):
    """
    Frequency histogram of one numeric column (ChartState.x_column).
    """

    id = "histogram"
    label = "Histogram"
    max_bins = 50

    def compute_data(self, state: ChartState) -> pd.DataFrame:
        if not state.x_column:
            return pd.DataFrame()

        values = numeric_values(self.store.get_data(), state.x_column)
        return pd.DataFrame({"value": values})

    def n_bins(self, n_values: int) -> int:
        return min(self.max_bins, max(1, n_values // 2))

    def render_figure(self, data: pd.DataFrame, state: ChartState) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No numeric data available for histogram")

        fig = px.histogram(data, x="value", nbins=self.n_bins(len(data)))
        fig.update_layout(
            height=600,
            margin=dict(l=40, r=40, t=60, b=40),
            title=state.title or "Histogram",
            xaxis_title=state.x_column,
            yaxis_title="Frequency",
        )
        return fig
