"""Root test configuration"""

import logging

import pytest


@pytest.fixture(autouse=True)
def debug_logging(caplog):
    """Capture docstore DEBUG records for every test."""
    caplog.set_level(logging.DEBUG, logger="docstore")
    yield caplog
