from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import plotly.graph_objects as go

from tab_browser.config.loader import load_app_config
from tab_browser.config.model import AppConfig
from tab_browser.core.chart_state import ChartState
from tab_browser.core.dataset import DatasetStore
from tab_browser.core.view_registry import ViewRegistry
from tab_browser.data_io.exporter import write_table
from tab_browser.data_io.importer import read_table
from tab_browser.views import BarView, HistogramView, LineView, ScatterView

logger = logging.getLogger(__name__)


def build_view_registry() -> ViewRegistry:
    registry = ViewRegistry()
    registry.register(ScatterView)
    registry.register(LineView)
    registry.register(BarView)
    registry.register(HistogramView)
    return registry


@dataclass
class Workbench:
    """
    Wires the dataset store to its collaborators: file import/export and
    chart views. Holds no data of its own.
    """
    config: AppConfig
    store: DatasetStore
    registry: ViewRegistry = field(default_factory=build_view_registry)

    def import_file(self, path: Path | str) -> None:
        rows, headers = read_table(path)
        self.store.set_data(rows, headers)

    def export_file(self, path: Path | str) -> None:
        write_table(path, self.store.get_data(), self.store.get_column_names())

    def new_chart_state(self) -> ChartState:
        return ChartState(chart_type=self.config.default_chart)

    def render_chart(self, state: ChartState) -> go.Figure:
        """
        Build the figure for `state` against the current rows.

        Raises:
            KeyError: if state.chart_type is not a registered view
        """
        view = self.registry.create(state.chart_type, self.store)
        if isinstance(view, HistogramView):
            view.max_bins = self.config.histogram_max_bins
        data = view.compute_data(state)
        return view.render_figure(data, state)


def create_workbench(config_root: Optional[Path | str] = None) -> Workbench:
    """
    Build a Workbench from `config_root/global.json`, or from defaults when
    no config root is given.
    """
    config = load_app_config(config_root) if config_root is not None else AppConfig()
    store = DatasetStore(history_depth=config.history_depth)

    logger.info(
        "Workbench created",
        extra={"ui_title": config.ui_title, "history_depth": config.history_depth},
    )
    return Workbench(config=config, store=store)
