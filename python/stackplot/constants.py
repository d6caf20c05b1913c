import ROOT


# Reserved sample name for observed data
DATA_SAMPLE = "Data"

# Headroom above the tallest of stack total and data
Y_MARGIN = 1.2

# Fixed display window of the ratio panel
RATIO_MIN = 0.5
RATIO_MAX = 1.5

# Only histograms whose name contains this go into the integral report
REPORT_FILTER = "h_Num_PV"

DEFAULT_LUMI_TEXT = "13 TeV"
DEFAULT_EXTRA_TEXT = "Preliminary"
DEFAULT_BASE_DIR = "Histograms"
REPORT_FILE_NAME = "Integral.txt"
IMAGE_FORMATS = ("pdf", "png")

# Base hues accepted in the color config. Unknown keywords fall back to kBlack.
BASE_COLORS = {
    "kRed": ROOT.kRed,
    "kBlue": ROOT.kBlue,
    "kGreen": ROOT.kGreen,
    "kMagenta": ROOT.kMagenta,
    "kYellow": ROOT.kYellow,
    "kOrange": ROOT.kOrange,
    "kAzure": ROOT.kAzure,
}
FALLBACK_COLOR = ROOT.kBlack

SOLID_FILL = 1001
DATA_MARKER = 20


class Style:
    """Draw options used for the different plot layers."""
    STACKED = "HIST"
    POINTS = "E1P"
    SAME = "SAME"


class LegendOption:
    FILL = "f"
    POINTS = "lep"
