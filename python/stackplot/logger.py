import logging
import os
import sys
from typing import Dict, Optional

class ColoredFormatter(logging.Formatter):
    """Console formatter coloring each record by its level."""

    COLORS = {
        logging.DEBUG: '\033[0;36m',    # Cyan
        logging.INFO: '\033[0;32m',     # Green
        logging.WARNING: '\033[0;33m',  # Yellow
        logging.ERROR: '\033[0;31m',    # Red
        logging.CRITICAL: '\033[0;35m'  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        message = super().format(record)
        color = self.COLORS.get(record.levelno)
        return f"{color}{message}{self.RESET}" if color else message

class PackageLogger:
    """
    One logger per stackplot component.

    Every component logger writes colored 'LEVEL - message' lines to stdout
    and timestamped lines to <log_dir>/<component>.log. The log directory is
    $STACKPLOT_LOG_DIR, or ./logs when unset.
    """
    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(PackageLogger, cls).__new__(cls)
        return cls._instance

    def __init__(self):
        if PackageLogger._initialized:
            return
        self.level = logging.INFO
        self.loggers: Dict[str, logging.Logger] = {}
        self.log_dir = os.environ.get("STACKPLOT_LOG_DIR", "logs")
        os.makedirs(self.log_dir, exist_ok=True)
        self.main_logger = self._setup_logger("stackplot", os.path.join(self.log_dir, "stackplot.log"))
        PackageLogger._initialized = True

    def _setup_logger(self, name: str, log_file: Optional[str] = None) -> logging.Logger:
        logger = logging.getLogger(name)
        logger.setLevel(self.level)

        # Loggers survive re-imports, handlers must not be doubled
        if logger.handlers:
            return logger

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(ColoredFormatter('%(levelname)s - %(message)s'))
        logger.addHandler(console_handler)

        if log_file:
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
            logger.addHandler(file_handler)
        return logger

    def get_logger(self, component: str) -> logging.Logger:
        """Logger of one component, created on first use."""
        if component not in self.loggers:
            self.loggers[component] = self._setup_logger(component, os.path.join(self.log_dir, f"{component}.log"))
        return self.loggers[component]

    def set_level(self, level: int) -> None:
        """Level of the main logger and of every component logger, present and future."""
        self.level = level
        self.main_logger.setLevel(level)
        for logger in self.loggers.values():
            logger.setLevel(level)

# Global instance
package_logger = PackageLogger()
