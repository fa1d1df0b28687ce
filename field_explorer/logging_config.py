"""
Logging for the explorer.

Streamlit re-runs the page script on every widget change, so ``setup_logging``
is called many times per session. Handlers it installs carry a tag and are
reused on later runs; handlers added by anyone else are left alone.
"""
import logging
import os
import sys
from typing import Optional, Union

LOGGER_NAME = "field_explorer"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"

_TAG = "_field_explorer_handler"


def _own_handlers(logger: logging.Logger):
    return [h for h in logger.handlers if getattr(h, _TAG, None)]


def _install(logger: logging.Logger, handler: logging.Handler, role: str) -> logging.Handler:
    setattr(handler, _TAG, role)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    return handler


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the ``field_explorer`` logger for the current page run.

    The console handler is created once. The file handler is replaced only
    when ``log_file`` changes, and removed when it is ``None``.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    handlers = {getattr(h, _TAG): h for h in _own_handlers(logger)}

    console = handlers.get("console")
    if console is None:
        console = _install(logger, logging.StreamHandler(sys.stdout), "console")
    console.setLevel(level)

    current = handlers.get("file")
    if current is not None and (not log_file or current.baseFilename != os.path.abspath(log_file)):
        logger.removeHandler(current)
        current.close()
        current = None
    if log_file and current is None:
        current = _install(logger, logging.FileHandler(log_file, mode="w", encoding="utf-8"), "file")
    if current is not None:
        current.setLevel(level)

    logger.debug("Logging ready (level=%s, file=%s).", logging.getLevelName(logger.level), log_file)
    return logger
