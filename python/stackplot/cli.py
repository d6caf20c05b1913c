from typing import List, Optional
import argparse
import logging
import sys
from .constants import DEFAULT_BASE_DIR, DEFAULT_LUMI_TEXT
from .errors import FatalIOError, FatalUsageError
from .logger import package_logger
from .plotter import Plotter


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise FatalUsageError(message)


def make_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="stackplot",
        description="Stack simulated-sample histograms, overlay data and draw the Data/MC ratio."
    )
    parser.add_argument("input_file_list", help="Text file with one ROOT histogram file per line")
    parser.add_argument("color_config_file", help="Lines of '<sample> <kColor> + <offset>'")
    parser.add_argument("scale_config_file", help="Lines of '<sample> <factor>'")
    parser.add_argument("hist_config_file", help="Lines of '<pattern> <rebin> <x label> [// comment]'")
    parser.add_argument("output_dir", help="Output goes to <base-dir>/<output_dir>")
    parser.add_argument("lumi_text", nargs="?", default=DEFAULT_LUMI_TEXT,
                        help=f"Luminosity text at the top right (default: {DEFAULT_LUMI_TEXT!r})")
    parser.add_argument("--base-dir", default=DEFAULT_BASE_DIR,
                        help=f"Parent of output_dir (default: {DEFAULT_BASE_DIR})")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: INFO)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logger = package_logger.get_logger("cli")
    parser = make_parser()
    try:
        args = parser.parse_args(argv)
    except FatalUsageError as e:
        parser.print_usage(sys.stderr)
        logger.error(f"Invalid arguments: {e}")
        return 1

    plotter = Plotter(
        input_file_list=args.input_file_list,
        color_config=args.color_config_file,
        scale_config=args.scale_config_file,
        hist_config=args.hist_config_file,
        output_dir=args.output_dir,
        lumi_text=args.lumi_text,
        base_dir=args.base_dir,
        log_level=getattr(logging, args.log_level),
    )
    try:
        plotter.run()
    except FatalIOError as e:
        logger.error(f"Aborting: {e}")
        return 1
    return 0
