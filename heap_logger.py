import logging
import sys

LOGGER_NAME = "binary_heap"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(LOGGER_NAME)


def print_(*args):
    logger.debug(" ".join(str(arg) for arg in args))


def configure(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger (only once)."""
    if not any(getattr(handler, "_binary_heap", False) for handler in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._binary_heap = True
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
