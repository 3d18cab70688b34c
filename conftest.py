"""
Shared pytest fixtures.

The CLI installs its own root handlers through account_address.logging; put
the root logger and the log context back after every test so later tests
(and pytest's own capture handlers) see a clean setup.
"""
from __future__ import annotations

import logging

import pytest

from account_address import logging as alog


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    alog.clear_context()
