from typing import Callable, Dict, List, Optional
import ROOT
from .constants import DATA_SAMPLE
from .histogram import same_binning
from .logger import package_logger


def sample_name_from_path(path: str) -> str:
    """Sample name of a histogram file: base name up to the first '.'."""
    base_name = path[path.rfind("/") + 1:]
    return base_name.split(".", 1)[0]


def is_data(sample_name: str) -> bool:
    return sample_name == DATA_SAMPLE


class HistogramSet:
    def __init__(self):
        """
        Histograms grouped by sample and histogram name.

        Simulated samples keep the order in which they were first added, which
        later decides the stacking order. Histograms of the reserved "Data"
        sample are kept apart. Each (sample, name) slot owns exactly one
        histogram; duplicates are summed into it.
        """
        self.logger = package_logger.get_logger("sample")
        self.histograms: Dict[str, Dict[str, ROOT.TH1]] = {}
        self.data_histograms: Dict[str, ROOT.TH1] = {}


    def add(self, sample_name: str, hist: ROOT.TH1) -> None:
        """Insert hist into its (sample, name) slot or sum it bin-by-bin into the existing one."""
        if is_data(sample_name):
            slot = self.data_histograms
        else:
            slot = self.histograms.setdefault(sample_name, {})

        hist_name = hist.GetName()
        existing = slot.get(hist_name)
        if existing is None:
            slot[hist_name] = hist
            return

        if not same_binning(existing, hist):
            self.logger.error(f"Could not add histogram {hist_name} to sample {sample_name}: inconsistent binning. Dropping it.")
            return
        existing.Add(hist)


    def samples(self) -> List[str]:
        """Simulated sample names in first-seen order."""
        return list(self.histograms)


    def stack_order(self) -> List[str]:
        """Simulated sample names bottom-to-top of the stack: reverse of first-seen order."""
        return self.samples()[::-1]


    def get(self, sample_name: str, hist_name: str) -> Optional[ROOT.TH1]:
        if is_data(sample_name):
            return self.data_histograms.get(hist_name)
        return self.histograms.get(sample_name, {}).get(hist_name)


    def data(self, hist_name: str) -> Optional[ROOT.TH1]:
        return self.data_histograms.get(hist_name)


    def histogram_names(self) -> List[str]:
        """Names that get a plot: those of the first-seen simulated sample."""
        if not self.histograms:
            return []
        return list(next(iter(self.histograms.values())))


    def all_histogram_names(self) -> List[str]:
        """Union of histogram names over all simulated samples, in first-seen order."""
        names = {}
        for hists in self.histograms.values():
            names.update(dict.fromkeys(hists))
        return list(names)


    def map(self, func: Callable[[ROOT.TH1], ROOT.TH1]) -> None:
        """Replace every histogram, simulated and data, with func(hist)."""
        for hists in list(self.histograms.values()) + [self.data_histograms]:
            for hist_name in hists:
                hists[hist_name] = func(hists[hist_name])


    def is_empty(self) -> bool:
        return not self.histograms and not self.data_histograms


    def __len__(self) -> int:
        return sum(len(hists) for hists in self.histograms.values()) + len(self.data_histograms)
