# logger_utils.py - logging setup, metrics lines and timed blocks

import logging
import os
import time
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

# Directory where log files go when file logging is switched on
LOG_DIR = "logs"

# Path to the default log file, can be overriden
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "typeahead.log")

# every module logs under this name via logging.getLogger(__name__)
ROOT_LOGGER = "typeahead"

_FILE_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"


class Log:
    """Project logger: console via Rich, optional log file, metrics and timers."""

    _logger = logging.getLogger(ROOT_LOGGER)

    @classmethod
    def setup(
        cls,
        level: Union[int, str] = "WARNING",
        path: Optional[str] = None,
        use_color: bool = True,
    ) -> logging.Logger:
        """
        Configure the `typeahead` logger. Safe to call more than once,
        previous handlers are replaced.
        path: write a log file there as well ("" or None = console only)
        """
        logger = cls._logger
        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()

        logger.setLevel(level.upper() if isinstance(level, str) else level)
        logger.propagate = False

        console = RichHandler(
            console=Console(stderr=True, no_color=not use_color),
            show_path=False,
            rich_tracebacks=True,
        )
        logger.addHandler(console)

        if path:
            folder = os.path.dirname(path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            fh = logging.FileHandler(path, encoding="utf-8")
            fh.setFormatter(logging.Formatter(_FILE_FORMAT, "%Y-%m-%d %H:%M:%S"))
            logger.addHandler(fh)
        return logger

    # Public logging methods
    @classmethod
    def debug(cls, msg: str) -> None:
        cls._logger.debug(msg)

    @classmethod
    def info(cls, msg: str) -> None:
        cls._logger.info(msg)

    @classmethod
    def metric(cls, tag: str, value, unit: str = "") -> None:
        """
        Record a metric (timing, counts).
        Example: vocabulary load done: 0.123s
        """
        cls._logger.info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label: str) -> "_Timer":
        """
        Measure a code block:
            with Log.time_block("vocabulary load") as t:
                load()
            t.elapsed  # seconds
        The duration is logged as a metric on exit.
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, label: str):
        self.label = label
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        Log.metric(f"{self.label} done", round(self.elapsed, 3), "s")
        return False
