"""Root pytest configuration for all tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_mdccc_logger():
    """Remove handlers the CLI attaches to the 'mdccc' logger between tests."""
    yield
    app_logger = logging.getLogger("mdccc")
    app_logger.handlers.clear()
    app_logger.setLevel(logging.NOTSET)
