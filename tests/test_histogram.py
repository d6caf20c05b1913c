import pytest

ROOT = pytest.importorskip("ROOT")

from stackplot.config import HistConfig
from stackplot.histogram import (
    apply_hist_config,
    histogram_integral,
    same_binning,
    style_data_histogram,
    style_sample_histogram,
)


def test_rebin_factor_one_keeps_bins(make_hist):
    hist = make_hist("h_Pt", [1, 2, 3, 4])
    configured = apply_hist_config(hist, {"h_Pt": HistConfig(1, "p_{T} [GeV]")})
    assert configured.GetNbinsX() == 4
    assert configured.GetXaxis().GetTitle() == "p_{T} [GeV]"


def test_rebin_returns_a_copy(make_hist, bin_contents):
    hist = make_hist("h_Pt_Lead", [1, 2, 3, 4])
    configured = apply_hist_config(hist, {"h_Pt": HistConfig(2, "")})
    assert bin_contents(configured) == [3, 7]
    assert configured.GetName() == "h_Pt_Lead"
    assert bin_contents(hist) == [1, 2, 3, 4]


def test_empty_label_keeps_title(make_hist):
    hist = make_hist("h_Pt", [1, 2])
    hist.GetXaxis().SetTitle("original")
    configured = apply_hist_config(hist, {"h_Pt": HistConfig(1, "")})
    assert configured.GetXaxis().GetTitle() == "original"


def test_only_first_match_is_applied(make_hist):
    hist = make_hist("h_Pt_Lead", [1, 2, 3, 4])
    configs = {"Lead": HistConfig(1, "first"), "h_Pt": HistConfig(2, "second")}
    configured = apply_hist_config(hist, configs)
    assert configured.GetXaxis().GetTitle() == "first"
    assert configured.GetNbinsX() == 4


def test_no_match_leaves_histogram_alone(make_hist):
    hist = make_hist("h_Eta", [1, 2])
    assert apply_hist_config(hist, {"h_Pt": HistConfig(2, "x")}) is hist


def test_style_sample_histogram(make_hist, bin_contents):
    hist = make_hist("h_x", [1, 2.5])
    styled = style_sample_histogram(hist, ROOT.kRed + 1, 2.0)
    assert bin_contents(styled) == [2, 5]
    assert styled.GetFillColor() == ROOT.kRed + 1
    assert styled.GetFillStyle() == 1001
    assert styled.GetLineColor() == ROOT.kBlack
    assert styled.GetLineWidth() == 1
    assert bin_contents(hist) == [1, 2.5]


def test_missing_scale_leaves_contents(make_hist, bin_contents):
    hist = make_hist("h_x", [1, 2.5])
    hist.SetFillColor(ROOT.kGreen)
    styled = style_sample_histogram(hist, None, None)
    assert bin_contents(styled) == bin_contents(hist)
    assert styled.GetFillColor() == ROOT.kGreen


def test_style_data_histogram(make_hist):
    styled = style_data_histogram(make_hist("h_x", [1]))
    assert styled.GetMarkerStyle() == 20
    assert styled.GetMarkerColor() == ROOT.kBlack


def test_histogram_integral(make_hist):
    assert histogram_integral(make_hist("h_x", [1, 2, 3.5])) == pytest.approx(6.5)
    assert histogram_integral(None) == 0.0


def test_same_binning(make_hist):
    assert same_binning(make_hist("a", [1, 2]), make_hist("b", [3, 4]))
    assert not same_binning(make_hist("a", [1, 2]), make_hist("b", [1, 2, 3]))
    assert not same_binning(make_hist("a", [1, 2], 0, 2), make_hist("b", [1, 2], 0, 4))
    assert not same_binning(make_hist("a", [1, 2]), ROOT.TH2D("b", "", 2, 0, 2, 2, 0, 2))
