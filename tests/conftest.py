import logging

import pytest

from textindexer.logging import configure_default_logging


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo configure_logging() calls so handlers never outlive a test."""
    yield
    logging.root.handlers.clear()
    logging.root.setLevel(logging.WARNING)
    configure_default_logging()
