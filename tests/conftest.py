"""Fixtures shared by every test package."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from flightboard.persistence.repositories.favourites_repo import FavouritesRepository
from tests.fakes import FakeFlightProvider
from tests.persistence.fake_firestore import FakeFirestoreClient


@pytest.fixture
def fake_client():
    """In-memory Firestore fake, shared across all repos in a single test."""
    return FakeFirestoreClient()


@pytest.fixture
def patch_firestore(fake_client):
    with patch(
        "flightboard.persistence.repositories.base.get_firestore_client",
        return_value=fake_client,
    ):
        yield fake_client


@pytest.fixture
def store(patch_firestore) -> FavouritesRepository:
    return FavouritesRepository()


@pytest.fixture
def provider() -> FakeFlightProvider:
    return FakeFlightProvider()
