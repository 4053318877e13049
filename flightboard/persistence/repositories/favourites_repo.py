"""Repository for saved favourite flights."""

from __future__ import annotations

import logging

from flightboard.contracts.favourite import SavedFlight
from flightboard.persistence.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class FavouritesRepository(BaseRepository[SavedFlight]):
    """Firestore-backed favourites store.

    Implements the ``FavouritesStore`` protocol used by the controllers.
    """

    def __init__(self):
        super().__init__(SavedFlight, "favourites")

    async def add_favourite(self, saved: SavedFlight, owner_id: str | None) -> str:
        """Persist ``saved`` under ``owner_id`` and return the new document ID."""
        entity = saved.model_copy(update={"user_id": owner_id or "", "id": ""})
        doc_id = await self.create(owner_id, entity)
        logger.info("Saved favourite %s for %s as %s", saved.flight_number, owner_id, doc_id)
        return doc_id

    async def list_favourites(self, owner_id: str | None) -> list[SavedFlight]:
        return await self.list_all(owner_id)

    async def delete_favourite(self, doc_id: str | None, owner_id: str | None) -> None:
        await self.delete(owner_id, doc_id)
        logger.info("Removed favourite %s for %s", doc_id, owner_id)
