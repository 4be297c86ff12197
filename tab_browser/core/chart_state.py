from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass
class ChartState:
    """
    Represents the current chart selection.

    Fields:

    - chart_type: id of the registered view to render (scatter, line, bar, histogram)
    - x_column: column plotted on the x axis (the binned column for histograms)
    - y_column: column plotted on the y axis; unused by histograms

    - title: optional figure title override
    """

    chart_type: str = "scatter"
    x_column: Optional[str] = None
    y_column: Optional[str] = None

    title: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ChartState:
        return cls(
            chart_type=data.get("chart_type", "scatter"),
            x_column=data.get("x_column"),
            y_column=data.get("y_column"),
            title=data.get("title"),
        )
