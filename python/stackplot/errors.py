class StackPlotError(Exception):
    """Base class for errors that end a stackplot run."""


class FatalUsageError(StackPlotError):
    """Wrong number of command-line arguments."""


class FatalIOError(StackPlotError):
    """The input file list or the report file could not be opened."""
