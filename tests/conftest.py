import os
import tempfile
import pytest

# Keep component log files out of the working directory
os.environ.setdefault("STACKPLOT_LOG_DIR", tempfile.mkdtemp(prefix="stackplot-logs-"))


@pytest.fixture(autouse=True)
def root_batch():
    ROOT = pytest.importorskip("ROOT")
    ROOT.gROOT.SetBatch(True)
    ROOT.TH1.AddDirectory(False)
    yield


@pytest.fixture
def make_hist():
    """Build a TH1D named name whose bin i+1 holds contents[i]."""
    ROOT = pytest.importorskip("ROOT")

    def _make_hist(name, contents, low=0.0, high=None, title=""):
        high = float(len(contents)) if high is None else high
        hist = ROOT.TH1D(name, title, len(contents), low, high)
        hist.SetDirectory(ROOT.nullptr)
        for i, content in enumerate(contents):
            hist.SetBinContent(i + 1, content)
        return hist

    return _make_hist


@pytest.fixture
def write_root_file():
    """Write objects into a new ROOT file, each under its own name."""
    ROOT = pytest.importorskip("ROOT")

    def _write_root_file(path, objects):
        root_file = ROOT.TFile(str(path), "RECREATE")
        for obj in objects:
            root_file.WriteTObject(obj, obj.GetName())
        root_file.Close()
        return str(path)

    return _write_root_file


@pytest.fixture
def bin_contents():
    return lambda hist: [hist.GetBinContent(i) for i in range(1, hist.GetNbinsX() + 1)]
