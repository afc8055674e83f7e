"""
Logging configuration for the artifact-transport package.

The library itself only emits records through the standard logging
module; this module is used by the command line interface to decide
where those records go and how verbose they are.
"""

import logging
import textwrap
from typing import Optional

# Default width for log message wrapping
DEFAULT_LOG_WIDTH = 120

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# Root level per number of -d flags
VERBOSITY_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


class WrappingFormatter(logging.Formatter):
    """Formatter that wraps long records at a fixed width."""

    def __init__(
        self, fmt: Optional[str] = None, datefmt: Optional[str] = None, width: int = DEFAULT_LOG_WIDTH
    ) -> None:
        super().__init__(fmt, datefmt)
        self.width = width

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        if len(formatted) <= self.width:
            return formatted

        lines = []
        for line in formatted.splitlines():
            lines.extend(textwrap.wrap(line, width=self.width, break_on_hyphens=False) or [""])
        return "\n".join(lines)


def setup_logging(verbosity: int = 0, use_wrapping: bool = False) -> None:
    """
    Route log records to stderr at the level the -d flags ask for.

    Args:
        verbosity: Number of -d flags given on the command line
        use_wrapping: Install a single handler with WrappingFormatter instead of basicConfig

    Verbosity Levels:
        0 (default): WARNING - Only warnings and errors
        1 (-d):      INFO - Transfers and session boundaries
        2 (-dd):     DEBUG - Headers, proxy decisions and listing details
        3+ (-ddd):   DEBUG - Also httpx/httpcore request logs
    """
    level = VERBOSITY_LEVELS[min(max(verbosity, 0), len(VERBOSITY_LEVELS) - 1)]

    if not use_wrapping:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    else:
        stderr_handler = logging.StreamHandler()
        stderr_handler.setFormatter(WrappingFormatter(fmt=LOG_FORMAT))
        root = logging.getLogger()
        root.handlers[:] = [stderr_handler]
        root.setLevel(level)

    # httpx logs every request at INFO
    http_level = logging.DEBUG if verbosity >= 3 else logging.WARNING
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(http_level)


__all__ = ["WrappingFormatter", "setup_logging"]
