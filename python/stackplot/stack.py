from typing import Dict, List, Optional
import ROOT
from .constants import DATA_SAMPLE, LegendOption, Y_MARGIN
from .histogram import histogram_integral, same_binning, style_data_histogram, style_sample_histogram
from .logger import package_logger
from .ratio import compute_ratio
from .sample import HistogramSet


logger = package_logger.get_logger("stack")


class StackEntry:
    def __init__(self, sample: str, hist: ROOT.TH1, integral: float):
        self.sample = sample
        self.hist = hist
        self.integral = integral


class LegendEntry:
    def __init__(self, hist: ROOT.TH1, label: str, option: str):
        self.hist = hist
        self.label = label
        self.option = option


class StackedPlot:
    def __init__(self, name: str):
        """
        Everything drawn for one histogram name.

        Args:
            name: Histogram name, also used for the output files
        """
        self.name = name
        self.entries: List[StackEntry] = []
        self.legend_entries: List[LegendEntry] = []
        self.total: Optional[ROOT.TH1] = None
        self.data: Optional[ROOT.TH1] = None
        self.ratio: Optional[ROOT.TH1] = None
        self.mc_integral = 0.0
        self.data_integral = 0.0


    def add(self, sample: str, hist: ROOT.TH1) -> bool:
        """Put a styled sample histogram on top of the stack and into the MC total. False if its binning does not match."""
        if self.total is None:
            self.total = hist.Clone(f"{self.name}_mc_total")
            self.total.SetDirectory(ROOT.nullptr)
            self.total.Reset()
        elif not same_binning(self.total, hist):
            return False
        self.total.Add(hist)

        integral = histogram_integral(hist)
        self.entries.append(StackEntry(sample, hist, integral))
        self.legend_entries.append(LegendEntry(hist, f"{sample} ({integral:.1f})", LegendOption.FILL))
        self.mc_integral += integral
        return True


    def set_data(self, hist: ROOT.TH1) -> None:
        self.data = hist
        self.data_integral = histogram_integral(hist)
        self.legend_entries.append(LegendEntry(hist, f"{DATA_SAMPLE} ({self.data_integral:.0f})", LegendOption.POINTS))


    @property
    def samples(self) -> List[str]:
        return [entry.sample for entry in self.entries]


    @property
    def maximum(self) -> float:
        """Y-axis maximum: tallest of MC total and data, plus headroom."""
        heights = [h.GetMaximum() for h in (self.total, self.data) if h is not None]
        return max(heights, default=0.0) * Y_MARGIN


    def make_stack(self) -> ROOT.THStack:
        """THStack in draw order. The entries must stay alive as long as the stack."""
        stack = ROOT.THStack(f"{self.name}_stack", "")
        for entry in self.entries:
            stack.Add(entry.hist)
        return stack


def build_stack(hist_name: str,
                histogram_set: HistogramSet,
                colors: Dict[str, int],
                scales: Dict[str, float]) -> Optional[StackedPlot]:
    """
    Stack all simulated samples for one histogram name, overlay data and compute the ratio.

    Samples are stacked in reverse of the order in which they were first seen,
    so the last-seen sample is at the bottom. A sample without this histogram
    is skipped. Missing colors leave the fill alone and missing scales mean a
    factor of 1. Returns None when no sample has the histogram.
    """
    plot = StackedPlot(hist_name)

    for sample in histogram_set.stack_order():
        hist = histogram_set.get(sample, hist_name)
        if hist is None:
            logger.warning(f"Histogram {hist_name} not found for sample {sample}")
            continue

        color = colors.get(sample)
        if color is None:
            logger.warning(f"Color not found for sample {sample}")
        scale = scales.get(sample)
        if scale is None:
            logger.warning(f"Scale not found for sample {sample}")

        if not plot.add(sample, style_sample_histogram(hist, color, scale)):
            logger.error(f"Histogram {hist_name} of sample {sample} has a different binning from the samples below it. Skipping it.")

    if not plot.entries:
        logger.warning(f"No sample provides histogram {hist_name}. Skipping it.")
        return None

    data = histogram_set.data(hist_name)
    if data is not None:
        plot.set_data(style_data_histogram(data))
        plot.ratio = compute_ratio(plot.data, plot.total)
    else:
        logger.info(f"No data histogram for {hist_name}. Plotting without ratio panel.")

    return plot
