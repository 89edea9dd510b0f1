import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers bound to a finished test's captured streams."""
    yield
    logger = logging.getLogger("langtour")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
