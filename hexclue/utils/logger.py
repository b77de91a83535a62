"""Log setup for the hexclue engine modules and the `main.py` command."""

from __future__ import annotations

import logging
from typing import IO, Optional

ROOT_LOGGER_NAME = "hexclue"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"


def configure_logging(level: int = logging.INFO, stream: Optional[IO[str]] = None) -> logging.Handler:
    """Install a single stream handler on the root logger.

    The solver narrates each deduced cell and the generator each rejected
    candidate at DEBUG, so a whole run at that level can be long. INFO keeps
    accepted puzzles and refinement results, which is what `--log-level`
    defaults to in `main.py`. Tests pass `stream` to capture the records.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for ``name``, or the `hexclue` logger when omitted.

    Importing an engine module without going through the CLI still installs
    the default handler here.
    """

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or ROOT_LOGGER_NAME)
