"""Shared pytest fixtures."""


import logging

import pytest

from scam_guard.log import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers installed by entry points so they never outlive a test."""
    yield
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
