"""Logging configuration for htmlsieve."""

import logging
import sys
from typing import TextIO

from htmlsieve.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
HANDLER_NAME = "htmlsieve.stream"

# Single library logger that can be imported throughout the package.
# Silent until the host application configures logging or calls setup_logging().
logger = logging.getLogger("htmlsieve")
logger.addHandler(logging.NullHandler())


def setup_logging(stream: TextIO | None = None) -> logging.Handler:
    """Send htmlsieve log records to a stream.

    Only the htmlsieve logger is touched; root handlers and other loggers
    keep the host application's configuration. Calling it again replaces
    the handler it added before. The level is DEBUG when HTMLSIEVE_DEBUG
    is set, INFO otherwise.

    Args:
        stream: Where to write records (default: stderr).

    Returns:
        The handler attached to the htmlsieve logger.

    """
    for existing in list(logger.handlers):
        if existing.get_name() == HANDLER_NAME:
            logger.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    # Records already go to our handler; avoid duplicates through the root
    logger.propagate = False

    app_log_level = logging.DEBUG if settings.htmlsieve_debug else logging.INFO
    logger.setLevel(app_log_level)

    level_name = "DEBUG" if settings.htmlsieve_debug else "INFO"
    logger.info("htmlsieve logging initialized at %s level", level_name)
    return handler
