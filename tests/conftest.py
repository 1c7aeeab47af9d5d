import logging

import pytest

from util import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_trace_logger():
    """Drop handlers left by configure_logging so they never outlive a test's streams."""
    yield
    log = logging.getLogger(LOGGER_NAME)
    for handler in list(log.handlers):
        log.removeHandler(handler)
    log.setLevel(logging.NOTSET)
