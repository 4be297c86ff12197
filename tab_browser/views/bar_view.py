from __future__ import annotations

from typing import Dict

import pandas as pd
import plotly.graph_objects as go

from tab_browser.core.base_view import BaseView
from tab_browser.core.cells import is_numeric
from tab_browser.core.chart_state import ChartState


class BarView(BaseView):
    """
    Bar chart: numeric y summed per x category.

    Any non-null x is a category (shown as text); categories keep the order
    in which they first appear in the rows.
    """

    id = "bar"
    label = "Bar Chart"

    def compute_data(self, state: ChartState) -> pd.DataFrame:
        if not state.x_column or not state.y_column:
            return pd.DataFrame()

        totals: Dict[str, float] = {}
        for row in self.store.get_data():
            x, y = row.get(state.x_column), row.get(state.y_column)
            if x is None or not is_numeric(y):
                continue
            category = str(x)
            totals[category] = totals.get(category, 0.0) + float(y)

        return pd.DataFrame(
            {"category": list(totals.keys()), "value": list(totals.values())}
        )

    def render_figure(self, data: pd.DataFrame, state: ChartState) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No numeric data for the selected columns")

        fig = go.Figure(go.Bar(x=data["category"], y=data["value"], name="Data"))
        fig.update_layout(
            height=600,
            margin=dict(l=40, r=40, t=60, b=40),
            title=state.title or "Bar Chart",
            xaxis_title=state.x_column,
            yaxis_title=state.y_column,
            showlegend=False,
        )
        return fig
