"""Logging to a size-limited file for the application and its storage."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

DEFAULT_LOG_FILE = "uebernotes.log"
DEFAULT_MAX_BYTES = 2097152
LOG_FORMAT = "%(asctime)s <%(process)d> %(levelname)s [%(name)s] %(message)s"

APP_LOGGER = "uebernotes"
LINUX_LOGGER = "uebernotes.linux"
CORE_LOGGER = "uebernotes.core"


class _LogFileHandler(RotatingFileHandler):
    """The file handler installed by init_logging, told apart from others."""


def init_logging(filename=DEFAULT_LOG_FILE, max_bytes=DEFAULT_MAX_BYTES) -> RotatingFileHandler:
    """Send all application log records to a file rotated at max_bytes.

    Calling it again replaces the file handler installed before.
    """
    logger = logging.getLogger(APP_LOGGER)
    for old in list(logger.handlers):
        if isinstance(old, _LogFileHandler):
            logger.removeHandler(old)
            old.close()

    handler = _LogFileHandler(
        os.fspath(filename), maxBytes=max_bytes, backupCount=1, encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    for name in (LINUX_LOGGER, CORE_LOGGER):
        logging.getLogger(name)
    return handler