import logging

import pytest

from semantic._tools._logging import get_logger


@pytest.fixture
def propagating_logger():
    """Lets `caplog` capture the records of the `semantic` logger."""
    logger = get_logger()
    logger.propagate = True
    yield logger
    logger.propagate = False


@pytest.fixture
def info_caplog(caplog, propagating_logger):
    caplog.set_level(logging.INFO, logger="semantic")
    return caplog
