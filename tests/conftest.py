"""
tests/conftest.py — gemeinsame Fixtures
"""

import logging

import pytest
from fastapi.testclient import TestClient

from pager.main import app
from pager.models.paging import PagerOptions
from pager.services.paging_state import PagingState


@pytest.fixture
def client():
    """TestClient ohne Lifespan (kein basicConfig nötig)."""
    return TestClient(app)


@pytest.fixture
def make_state():
    """Factory für PagingState mit Modell-Defaults (unabhängig von ENV)."""

    def _make(request_uri="/list", **properties):
        return PagingState(PagerOptions(), request_uri=request_uri, **properties)

    return _make


@pytest.fixture
def restore_log_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
