# wp_scraper/logger.py
"""Package logger.

Everything logs through :data:`logger`::

    from wp_scraper.logger import logger
    logger.info("Category %s: %d articles", name, count)

Output goes to *stdout* so that ``-v`` progress lines sit next to the
scraped JSON. Only warnings and errors are shown until the CLI calls
:func:`init_logging` with ``INFO``.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Optional, Union

_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(message)s"
_LOGGER_NAME: Final[str] = "WPScraper"


def init_logging(
    level: Union[int, str] = "WARNING", log_file: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """Reset the package logger: stdout at *level*, plus *log_file* if given.

    The log file rotates at 5 MB and keeps three backups. An unwritable
    *log_file* raises :class:`OSError`.
    """
    formatter = logging.Formatter(_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(str(log_file), maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")
        )

    lg = logging.getLogger(_LOGGER_NAME)
    lg.setLevel(level)
    lg.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        lg.addHandler(handler)
    lg.propagate = False
    return lg


logger: logging.Logger = init_logging()

__all__ = ["logger", "init_logging"]
