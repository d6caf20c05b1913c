from .plotter import Plotter
from .sample import HistogramSet
from .stack import StackedPlot
from .config import HistConfig
from .styles import PlotStyle

__all__ = [
    "Plotter",
    "HistogramSet",
    "StackedPlot",
    "HistConfig",
    "PlotStyle"
]
