"""Logging configuration for client diagnostics."""
import logging
import sys

LOGGER_NAME = "youareell"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Send the package's log records to the current stdout.

    Verbose mode turns on the request/response trace at DEBUG; otherwise only
    warnings (such as a watch cursor falling out of the feed window) are shown.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
