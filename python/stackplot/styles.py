from typing import Optional
import ROOT
from .constants import DEFAULT_EXTRA_TEXT, DEFAULT_LUMI_TEXT


class PlotStyle:
    def __init__(self,
                 name: str = "tdrStyle",
                 canvas_width: int = 1200,
                 canvas_height: int = 1200,
                 pad_split: float = 0.3,
                 legend_box: tuple = (0.6, 0.45, 0.93, 0.88),
                 font: int = 42):
        """
        CMS TDR plot style plus the layout used for every plot.

        Built once at startup and handed to every drawing call.

        Args:
            name: Name of the ROOT style
            canvas_width: Canvas width in pixels
            canvas_height: Canvas height in pixels
            pad_split: Fraction of the canvas height taken by the ratio pad
            legend_box: Legend corners (x1, y1, x2, y2) in NDC
            font: ROOT font code for axis labels, titles and legend
        """
        self.name = name
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height
        self.pad_split = pad_split
        self.legend_box = legend_box
        self.font = font
        self.style = self._make_tdr_style()


    def _make_tdr_style(self) -> ROOT.TStyle:
        style = ROOT.TStyle(self.name, "Style for P-TDR")

        # Canvas
        style.SetCanvasBorderMode(0)
        style.SetCanvasColor(ROOT.kWhite)
        style.SetCanvasDefH(self.canvas_height)
        style.SetCanvasDefW(self.canvas_width)

        # Pad
        style.SetPadBorderMode(0)
        style.SetPadColor(ROOT.kWhite)
        style.SetPadGridX(False)
        style.SetPadGridY(False)
        style.SetGridColor(0)
        style.SetGridStyle(3)
        style.SetGridWidth(1)

        # Frame
        style.SetFrameBorderMode(0)
        style.SetFrameBorderSize(1)
        style.SetFrameFillColor(0)
        style.SetFrameFillStyle(0)
        style.SetFrameLineColor(1)
        style.SetFrameLineStyle(1)
        style.SetFrameLineWidth(1)

        # Histogram
        style.SetHistLineColor(1)
        style.SetHistLineStyle(0)
        style.SetHistLineWidth(1)
        style.SetEndErrorSize(2)
        style.SetMarkerStyle(20)

        # Options
        style.SetOptStat(0)
        style.SetOptTitle(0)
        style.SetOptFit(0)

        # Margins
        style.SetPadTopMargin(0.05)
        style.SetPadBottomMargin(0.13)
        style.SetPadLeftMargin(0.16)
        style.SetPadRightMargin(0.02)

        # Axis titles and labels
        style.SetTitleFont(self.font, "XYZ")
        style.SetTitleSize(0.06, "XYZ")
        style.SetTitleXOffset(0.9)
        style.SetTitleYOffset(1.25)
        style.SetLabelFont(self.font, "XYZ")
        style.SetLabelOffset(0.007, "XYZ")
        style.SetLabelSize(0.05, "XYZ")
        style.SetAxisColor(1, "XYZ")
        style.SetStripDecimals(True)
        style.SetTickLength(0.03, "XYZ")
        style.SetNdivisions(510, "XYZ")
        style.SetPadTickX(1)
        style.SetPadTickY(1)

        # Font
        style.SetTextFont(self.font)
        style.SetLegendFont(self.font)
        style.SetLegendBorderSize(0)
        return style


    def apply(self) -> None:
        """Make this the current ROOT style. Call once before drawing."""
        self.style.cd()
        ROOT.gROOT.ForceStyle()


def draw_cms_label(pad: ROOT.TPad,
                   extra_text: str = DEFAULT_EXTRA_TEXT,
                   lumi_text: str = DEFAULT_LUMI_TEXT,
                   style: Optional[PlotStyle] = None) -> ROOT.TLatex:
    """Draw "CMS" and extra_text at the top left of pad and lumi_text at the top right."""
    font = style.font if style else 42
    pad.cd()
    label = ROOT.TLatex()
    label.SetNDC()
    label.SetTextAngle(0)
    label.SetTextColor(ROOT.kBlack)

    label.SetTextFont(61)
    label.SetTextSize(0.07)
    label.DrawLatex(0.2, 0.83, "CMS")

    if extra_text:
        label.SetTextFont(52)
        label.SetTextSize(0.05)
        label.DrawLatex(0.2, 0.78, extra_text)

    label.SetTextFont(font)
    label.SetTextSize(0.05)
    label.SetTextAlign(31)
    label.DrawLatex(0.94, 0.94, lumi_text)
    return label
