from typing import Dict, Optional
import math
import ROOT
from .config import HistConfig, find_hist_config
from .constants import DATA_MARKER, SOLID_FILL
from .logger import package_logger


logger = package_logger.get_logger("histogram")


def _copy(hist: ROOT.TH1) -> ROOT.TH1:
    """Detached clone that keeps the name of hist."""
    copy = hist.Clone(hist.GetName())
    copy.SetDirectory(ROOT.nullptr)
    return copy


def apply_hist_config(hist: ROOT.TH1, hist_configs: Dict[str, HistConfig]) -> ROOT.TH1:
    """
    Apply the first display config whose pattern is contained in the histogram name.

    Returns a rebinned/relabelled copy, or hist itself when no pattern matches.
    """
    match = find_hist_config(hist.GetName(), hist_configs)
    if match is None:
        return hist

    pattern, config = match
    logger.debug(f"Applying config {pattern} to {hist.GetName()}: rebin={config.rebin}, x_label={config.x_label}")
    configured = _copy(hist)
    if config.rebin > 1:
        configured.Rebin(config.rebin)
    if config.x_label:
        configured.GetXaxis().SetTitle(config.x_label)
    return configured


def style_sample_histogram(hist: ROOT.TH1, color: Optional[int] = None, scale: Optional[float] = None) -> ROOT.TH1:
    """Copy of a simulated-sample histogram with solid fill, black outline, fill color and scale applied."""
    styled = _copy(hist)
    styled.SetFillStyle(SOLID_FILL)
    styled.SetLineColor(ROOT.kBlack)
    styled.SetLineWidth(1)
    if color is not None:
        styled.SetFillColor(color)
    if scale is not None:
        styled.Scale(scale)
    return styled


def style_data_histogram(hist: ROOT.TH1) -> ROOT.TH1:
    """Copy of the data histogram drawn as black points."""
    styled = _copy(hist)
    styled.SetMarkerStyle(DATA_MARKER)
    styled.SetMarkerSize(1.0)
    styled.SetMarkerColor(ROOT.kBlack)
    styled.SetLineColor(ROOT.kBlack)
    return styled


def histogram_integral(hist: Optional[ROOT.TH1]) -> float:
    """Sum of the in-range bin contents, 0 for a missing histogram."""
    return hist.Integral() if hist is not None else 0.0


def same_binning(first: ROOT.TH1, second: ROOT.TH1) -> bool:
    """Whether both histograms have the same bin edges on every axis."""
    if first.GetDimension() != second.GetDimension():
        return False
    axes = [(first.GetXaxis(), second.GetXaxis()), (first.GetYaxis(), second.GetYaxis()), (first.GetZaxis(), second.GetZaxis())]
    for axis_a, axis_b in axes[:first.GetDimension()]:
        if axis_a.GetNbins() != axis_b.GetNbins():
            return False
        for i in range(1, axis_a.GetNbins() + 2):
            if not math.isclose(axis_a.GetBinLowEdge(i), axis_b.GetBinLowEdge(i), rel_tol=1e-9, abs_tol=1e-12):
                return False
    return True
