# This project was developed with assistance from AI tools.
"""Shared fixtures.

The app from ``homefit.main`` is a module singleton; ``client`` overrides the
catalogue dependency with the bundled seed listings and clears overrides
afterwards so nothing leaks between tests.
"""

import pytest
from fastapi.testclient import TestClient

from homefit.main import app as real_app
from homefit.services.catalogue import get_catalogue, seed_catalogue


@pytest.fixture
def catalogue():
    """The bundled eight-listing catalogue."""
    return seed_catalogue()


@pytest.fixture
def app():
    return real_app


@pytest.fixture
def client(app, catalogue):
    """TestClient with the seed catalogue injected."""
    app.dependency_overrides[get_catalogue] = lambda: catalogue
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
