from typing import Optional
import ROOT
from .constants import RATIO_MAX, RATIO_MIN
from .histogram import same_binning
from .logger import package_logger


logger = package_logger.get_logger("ratio")


def compute_ratio(data: Optional[ROOT.TH1], total: Optional[ROOT.TH1]) -> Optional[ROOT.TH1]:
    """
    Bin-wise data / simulated total.

    Bins where the total is zero are left to TH1::Divide, which sets them to 0.
    The display range is fixed to [RATIO_MIN, RATIO_MAX]; contents outside it
    are kept. Returns None if there is no data or the binning is inconsistent.
    """
    if data is None or total is None:
        return None

    if not same_binning(data, total):
        logger.error(f"Could not divide data by MC total for {data.GetName()}: inconsistent binning. No ratio panel.")
        return None

    ratio = data.Clone(f"{data.GetName()}_ratio")
    ratio.SetDirectory(ROOT.nullptr)
    ratio.SetTitle("")
    ratio.Divide(total)

    ratio.SetMinimum(RATIO_MIN)
    ratio.SetMaximum(RATIO_MAX)
    ratio.SetStats(0)
    ratio.GetYaxis().SetTitle("Data/MC")
    ratio.GetXaxis().SetTitle(total.GetXaxis().GetTitle())
    return ratio
