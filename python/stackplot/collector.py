from typing import List
import ROOT
from .errors import FatalIOError
from .logger import package_logger
from .sample import HistogramSet, sample_name_from_path


logger = package_logger.get_logger("collector")


def read_file_list(path: str) -> List[str]:
    """Histogram file paths listed one per line. Blank and '#' lines are ignored."""
    try:
        with open(path) as file_list:
            lines = [line.strip() for line in file_list]
    except OSError as e:
        logger.error(f"Could not open input file list {path}: {e}")
        raise FatalIOError(f"Could not open input file list {path}") from e
    return [line for line in lines if line and not line.startswith("#")]


def _is_histogram_key(key: ROOT.TKey) -> bool:
    """Whether the object stored under key is a histogram, checked on its class without reading it."""
    cls = ROOT.TClass.GetClass(key.GetClassName())
    return bool(cls) and cls.InheritsFrom(ROOT.TH1.Class())


def read_histograms(path: str) -> List[ROOT.TH1]:
    """
    Read every histogram stored at the top level of a ROOT file.

    The histograms are detached from the file and owned by Python, so they
    outlive the file handle. Only the highest cycle of each key is read.
    An unreadable file gives an empty list.
    """
    try:
        root_file = ROOT.TFile.Open(path, "READ")
    except OSError as e:
        logger.error(f"Could not open file {path}: {e}. Skipping it.")
        return []
    if not root_file or root_file.IsZombie():
        logger.error(f"Could not open file {path}. Skipping it.")
        return []

    hists = []
    seen = set()
    for key in root_file.GetListOfKeys():
        name = key.GetName()
        if name in seen or not _is_histogram_key(key):
            continue
        seen.add(name)

        hist = key.ReadObj()
        if not isinstance(hist, ROOT.TH1):
            logger.warning(f"Object {name} in {path} is not a histogram. Skipping it.")
            continue
        hist.SetDirectory(ROOT.nullptr)
        ROOT.SetOwnership(hist, True)
        hists.append(hist)

    root_file.Close()
    logger.debug(f"Read {len(hists)} histograms from {path}")
    return hists


def collect_histograms(paths: List[str]) -> HistogramSet:
    """Read all files in order and group their histograms by sample."""
    histogram_set = HistogramSet()
    for path in paths:
        sample_name = sample_name_from_path(path)
        hists = read_histograms(path)
        logger.info(f"Sample {sample_name}: {len(hists)} histograms from {path}")
        for hist in hists:
            histogram_set.add(sample_name, hist)
    return histogram_set
