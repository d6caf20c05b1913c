import pytest

ROOT = pytest.importorskip("ROOT")

from stackplot.config import (
    HistConfig,
    find_hist_config,
    load_color_config,
    load_hist_config,
    load_scale_config,
    parse_color_line,
    parse_hist_config_line,
    parse_scale_line,
    process_label_escapes,
)


def write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


@pytest.mark.parametrize("line, expected", [
    ("QCD kRed + 1", ("QCD", ROOT.kRed + 1)),
    ("TTbar kAzure + 0", ("TTbar", ROOT.kAzure)),
    ("DY   kOrange   +   -3", ("DY", ROOT.kOrange - 3)),
    ("WJets Green + 2", ("WJets", ROOT.kGreen + 2)),
])
def test_parse_color_line(line, expected):
    assert parse_color_line(line) == expected


def test_unknown_color_falls_back_to_black():
    assert parse_color_line("Signal kPurple + 2") == ("Signal", ROOT.kBlack + 2)


@pytest.mark.parametrize("line", [
    "QCD kRed 1",
    "QCD kRed - 1",
    "QCD kRed + one",
    "QCD kRed +",
    "QCD kRed + 1 extra",
    "QCD",
])
def test_parse_color_line_invalid(line):
    assert parse_color_line(line) is None


def test_load_color_config_skips_bad_lines(tmp_path, caplog):
    path = write(tmp_path, "colors.txt", "QCD kRed + 1\nTTbar kBlue 2\n\nDY kGreen + 3\n")
    colors = load_color_config(path)
    assert colors == {"QCD": ROOT.kRed + 1, "DY": ROOT.kGreen + 3}
    assert "TTbar kBlue 2" in caplog.text


def test_load_color_config_last_write_wins(tmp_path):
    path = write(tmp_path, "colors.txt", "QCD kRed + 1\nDY kBlue + 0\nQCD kMagenta + 2\n")
    colors = load_color_config(path)
    assert colors["QCD"] == ROOT.kMagenta + 2
    assert list(colors) == ["QCD", "DY"]


def test_missing_config_gives_empty_mapping(tmp_path, caplog):
    missing = str(tmp_path / "nope.txt")
    assert load_color_config(missing) == {}
    assert load_scale_config(missing) == {}
    assert load_hist_config(missing) == {}
    assert "Could not open color config file" in caplog.text


def test_parse_scale_line():
    assert parse_scale_line("QCD 2.0") == ("QCD", 2.0)
    assert parse_scale_line("TTbar 1e-3 ignored") == ("TTbar", 1e-3)
    assert parse_scale_line("QCD") is None
    assert parse_scale_line("QCD two") is None


def test_load_scale_config(tmp_path):
    path = write(tmp_path, "scales.txt", "QCD 2.0\nbroken\nDY 0.5\n")
    assert load_scale_config(path) == {"QCD": 2.0, "DY": 0.5}


def test_process_label_escapes():
    assert process_label_escapes(r"\eta\\(jet)") == r"\eta (jet)"
    assert process_label_escapes(r"p_{T}\\\\[GeV]") == "p_{T}  [GeV]"
    assert process_label_escapes("trailing\\") == "trailing\\"


def test_parse_hist_config_line():
    pattern, config = parse_hist_config_line("h_Pt 2    p_{T} [GeV]   // leading jet  ")
    assert pattern == "h_Pt"
    assert config == HistConfig(2, "p_{T} [GeV]")


def test_parse_hist_config_line_escapes_label():
    _, config = parse_hist_config_line(r"h_Eta 5 \eta\\(jet)")
    assert config.x_label == r"\eta (jet)"


def test_parse_hist_config_line_without_label():
    assert parse_hist_config_line("h_Num_PV 1") == ("h_Num_PV", HistConfig(1, ""))
    assert parse_hist_config_line("h_Num_PV 1 // only a comment") == ("h_Num_PV", HistConfig(1, ""))


@pytest.mark.parametrize("line", ["h_Pt", "h_Pt two label", "h_Pt 2.5 label"])
def test_parse_hist_config_line_invalid(line):
    assert parse_hist_config_line(line) is None


def test_find_hist_config_first_match_wins(tmp_path):
    path = write(tmp_path, "hists.txt", "h_Pt 2 first\nh_Pt_Lead 4 second\n")
    configs = load_hist_config(path)
    assert find_hist_config("h_Pt_Lead", configs) == ("h_Pt", HistConfig(2, "first"))
    assert find_hist_config("h_Eta", configs) is None
