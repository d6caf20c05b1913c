from typing import Optional, TextIO
from .constants import REPORT_FILTER
from .errors import FatalIOError
from .logger import package_logger
from .stack import StackedPlot


def should_report(hist_name: str) -> bool:
    return REPORT_FILTER in hist_name


class ReportWriter:
    def __init__(self, path: str):
        """
        Text summary of per-sample integrals.

        Only histograms whose name contains REPORT_FILTER are written; every
        other plot is ignored.

        Args:
            path: Output file, truncated on open
        """
        self.logger = package_logger.get_logger("report")
        self.path = path
        try:
            self._file: Optional[TextIO] = open(path, "w")
        except OSError as e:
            self.logger.error(f"Could not open output file for integrals {path}: {e}")
            raise FatalIOError(f"Could not open output file for integrals {path}") from e


    def __enter__(self) -> "ReportWriter":
        return self


    def __exit__(self, *exc) -> None:
        self.close()


    def write(self, plot: StackedPlot) -> bool:
        """Append the integrals of plot. Returns whether anything was written."""
        if not should_report(plot.name):
            return False

        lines = [plot.name, ""]
        lines += [f"{entry.sample} {entry.integral:g}" for entry in plot.entries]
        lines.append(f"MCtotal:  {plot.mc_integral:g}")
        if plot.data is not None:
            lines.append(f"Data  {plot.data_integral:g}")
            if plot.data_integral != 0:
                lines.append(f"Frac(MC/Data)  {plot.mc_integral / plot.data_integral:g}")
            else:
                self.logger.warning(f"Data integral of {plot.name} is zero. Not writing MC/Data fraction.")
        lines.append("")

        self._file.write("\n".join(lines) + "\n")
        self.logger.info(f"Integrals of {plot.name} written to {self.path}")
        return True


    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
