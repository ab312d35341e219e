"""Root logger configuration for the command-line entry point.

The domain and the services never log; they raise. Logging is wired here
and used by the infrastructure modules only.
"""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "WARNING",
    logfile: str | None = None,
    logger: logging.Logger | None = None,
) -> None:
    """Configure *logger* (the root logger by default).

    Attaches a console handler and, when *logfile* is given, a file
    handler. Does nothing if the logger already has handlers, which
    happens when the CLI is invoked repeatedly in one process (tests).
    Unknown level names fall back to INFO.
    """
    logger = logger or logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
