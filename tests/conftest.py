"""Root conftest: shared test fixtures.

Invariants:
    - get_settings cache cleared around every test, so env overrides never leak
    - Root logger handlers and level restored after every test
"""

import logging

import pytest

from pattern_gallery.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logger():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)


