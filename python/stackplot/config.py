from typing import Callable, Dict, Iterator, Optional, Tuple, TypeVar
from .constants import BASE_COLORS, FALLBACK_COLOR
from .logger import package_logger


logger = package_logger.get_logger("config")

T = TypeVar("T")


class HistConfig:
    def __init__(self, rebin: int = 1, x_label: str = ""):
        """
        Display settings for histograms matching a name pattern.

        Args:
            rebin: Number of adjacent bins merged into one (1 or less leaves the binning alone)
            x_label: X-axis title, empty to keep the stored title
        """
        self.rebin = rebin
        self.x_label = x_label

    def __eq__(self, other):
        if not isinstance(other, HistConfig):
            return NotImplemented
        return self.rebin == other.rebin and self.x_label == other.x_label

    def __repr__(self):
        return f"HistConfig(rebin={self.rebin}, x_label={self.x_label!r})"


def resolve_color(color_name: str, offset: int) -> int:
    """Turn a color keyword such as kRed (or Red) plus a shade offset into a ROOT color index."""
    if not color_name.startswith("k"):
        color_name = "k" + color_name
    base = BASE_COLORS.get(color_name)
    if base is None:
        logger.warning(f"Unknown color {color_name}. Using kBlack as base color.")
        base = FALLBACK_COLOR
    return base + offset


def parse_color_line(line: str) -> Optional[Tuple[str, int]]:
    """Parse '<sample> <color> + <offset>'. Returns None if the line does not match."""
    tokens = line.split()
    if len(tokens) != 4 or tokens[2] != "+":
        return None
    sample_name, color_name, _, offset = tokens
    try:
        offset = int(offset)
    except ValueError:
        return None
    return sample_name, resolve_color(color_name, offset)


def parse_scale_line(line: str) -> Optional[Tuple[str, float]]:
    """Parse '<sample> <factor>'. Trailing tokens are ignored."""
    tokens = line.split()
    if len(tokens) < 2:
        return None
    try:
        return tokens[0], float(tokens[1])
    except ValueError:
        return None


def process_label_escapes(label: str) -> str:
    """Collapse every double backslash to a space, keep other backslash sequences (e.g. \\eta) for ROOT."""
    processed = []
    i = 0
    while i < len(label):
        if label[i] == "\\" and label[i + 1:i + 2] == "\\":
            processed.append(" ")
            i += 2
        else:
            processed.append(label[i])
            i += 1
    return "".join(processed)


def parse_hist_config_line(line: str) -> Optional[Tuple[str, HistConfig]]:
    """Parse '<pattern> <rebin> <label...>', stripping a trailing // comment from the label."""
    tokens = line.split(None, 2)
    if len(tokens) < 2:
        return None
    pattern, rebin = tokens[0], tokens[1]
    try:
        rebin = int(rebin)
    except ValueError:
        return None

    label = tokens[2] if len(tokens) == 3 else ""
    comment_pos = label.find("//")
    if comment_pos != -1:
        label = label[:comment_pos]
    label = label.rstrip(" \t\r\n")
    return pattern, HistConfig(rebin, process_label_escapes(label))


def _read_lines(path: str, kind: str) -> Iterator[str]:
    try:
        with open(path) as config_file:
            lines = config_file.read().splitlines()
    except OSError as e:
        logger.error(f"Could not open {kind} config file {path}: {e}")
        return
    for line in lines:
        if line.strip():
            yield line


def _load(path: str, kind: str, parse_line: Callable[[str], Optional[Tuple[str, T]]]) -> Dict[str, T]:
    entries: Dict[str, T] = {}
    for line in _read_lines(path, kind):
        parsed = parse_line(line)
        if parsed is None:
            logger.error(f"Invalid format in {kind} config file {path}: {line}")
            continue
        key, value = parsed
        logger.debug(f"{kind} config: {key} -> {value}")
        entries[key] = value
    logger.info(f"Loaded {len(entries)} entries from {kind} config file {path}")
    return entries


def load_color_config(path: str) -> Dict[str, int]:
    """Load sample name -> ROOT color index."""
    return _load(path, "color", parse_color_line)


def load_scale_config(path: str) -> Dict[str, float]:
    """Load sample name -> scale factor."""
    return _load(path, "scale", parse_scale_line)


def load_hist_config(path: str) -> Dict[str, HistConfig]:
    """Load histogram name pattern -> display settings, in file order."""
    return _load(path, "histogram", parse_hist_config_line)


def find_hist_config(hist_name: str, hist_configs: Dict[str, HistConfig]) -> Optional[Tuple[str, HistConfig]]:
    """First pattern (in insertion order) contained in hist_name."""
    return next(((pattern, config) for pattern, config in hist_configs.items() if pattern in hist_name), None)
