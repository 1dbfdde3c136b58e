"""
Handlers for the ``quadgeo`` logger, used by the command line tool.

Library modules only call logging.getLogger(__name__); attaching handlers is
left to whoever runs the code.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s %(levelname)-7s %(name)s: %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route ``quadgeo`` log records to stderr, and to ``log_file`` when given.

    Calling it again replaces (and closes) the handlers installed last time,
    so an earlier log file is released.
    """
    logger = logging.getLogger("quadgeo")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
