from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from tab_browser.core.base_view import BaseView
from tab_browser.core.chart_state import ChartState


class ScatterView(BaseView):
    """
    Scatter plot of two numeric columns.
    """

    id = "scatter"
    label = "Scatter Plot"

    def compute_data(self, state: ChartState) -> pd.DataFrame:
        if not state.x_column or not state.y_column:
            return pd.DataFrame()

        pairs = self.numeric_pairs(state.x_column, state.y_column)
        return pd.DataFrame(pairs, columns=["x", "y"])

    def render_figure(self, data: pd.DataFrame, state: ChartState) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No numeric data for the selected columns")

        fig = px.scatter(data, x="x", y="y")
        fig.update_layout(
            height=600,
            margin=dict(l=40, r=40, t=60, b=40),
            title=state.title or "Scatter Plot",
            xaxis_title=state.x_column,
            yaxis_title=state.y_column,
        )
        return fig
