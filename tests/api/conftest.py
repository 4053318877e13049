"""Shared fixtures for API tests."""

from __future__ import annotations

import httpx
import pytest

from flightboard.api.app import app
from flightboard.api.deps import get_current_user, get_flight_provider
from tests.fakes import TEST_USER_ID


@pytest.fixture
def test_app(patch_firestore, provider, monkeypatch):
    """FastAPI app with dependency overrides for testing."""
    monkeypatch.delenv("FLIGHTBOARD_FEATURED_AIRPORT", raising=False)
    # Override auth to return a fixed test user
    app.dependency_overrides[get_current_user] = lambda: TEST_USER_ID
    app.dependency_overrides[get_flight_provider] = lambda: provider
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(test_app):
    """httpx AsyncClient wired to the test app."""
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
