from .scatter_view import ScatterView
from .line_view import LineView
from .bar_view import BarView
from .histogram_view import HistogramView

__all__ = [
    "ScatterView",
    "LineView",
    "BarView",
    "HistogramView",
]
