from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

CHART_TYPES = ("scatter", "line", "bar", "histogram")


@dataclass(frozen=True)
class AppConfig:
    """
    Parsed global.json.

    - ui_title: window/page title
    - history_depth: undo/redo snapshots kept per stack; None means unbounded
    - default_chart: chart type preselected for new ChartStates
    - histogram_max_bins: upper bound on histogram bins
    - data_root: default directory for import/export dialogs, if configured
    """
    ui_title: str = "Tabular Browser"
    history_depth: Optional[int] = None
    default_chart: str = "scatter"
    histogram_max_bins: int = 50
    data_root: Optional[Path] = None
