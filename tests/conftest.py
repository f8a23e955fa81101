import logging

import pytest

from heap_logger import logger


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    for handler in list(logger.handlers):
        if getattr(handler, "_binary_heap", False):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
