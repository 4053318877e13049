"""Tests for the lazily created Firestore client."""

from __future__ import annotations

from unittest.mock import patch

from flightboard.persistence import firestore_client


class TestFirestoreClient:
    def test_singleton(self):
        firestore_client._reset_client()
        with patch.object(firestore_client, "AsyncClient") as factory:
            first = firestore_client.get_firestore_client()
            second = firestore_client.get_firestore_client()
        assert first is second
        factory.assert_called_once_with()
        firestore_client._reset_client()
