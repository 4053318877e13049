"""The signed-in user's favourites: load, delete, and status refresh."""

from __future__ import annotations

import asyncio
import logging

from flightboard.contracts.favourite import SavedFlight
from flightboard.contracts.result import ServiceResult
from flightboard.contracts.state import FavouritesState
from flightboard.controllers.base import BaseController
from flightboard.persistence.errors import (
    DocumentNotFoundError,
    InvalidReferenceError,
    NotAuthenticatedError,
)
from flightboard.services.protocols import TARGETED_LIMIT, FavouritesStore, FlightProvider

logger = logging.getLogger(__name__)

LOAD_LOGIN_MESSAGE = "Please log in to view favourite flights."
LOAD_ERROR = "Failed to load favourites."
DELETE_LOGIN_MESSAGE = "You must be logged in to remove flights."
MISSING_ID_MESSAGE = "Missing document ID for this flight."
DELETE_ERROR = "Failed to remove from list."
REFRESH_ERROR = "Failed to refresh flight statuses."


def merge_status(saved: SavedFlight, outcome: ServiceResult[str]) -> SavedFlight:
    """Apply a refresh outcome: a fresh status replaces the old one, else keep it."""
    if outcome.success and outcome.data:
        return saved.model_copy(update={"status": outcome.data})
    return saved


class FavouritesController(BaseController[FavouritesState]):
    """Backs the favourites screen.

    ``favourites`` mirrors the store: replaced on load, pruned locally on a
    successful delete. Refreshed statuses stay in memory only.
    """

    def __init__(self, provider: FlightProvider, store: FavouritesStore):
        super().__init__(FavouritesState())
        self._provider = provider
        self._store = store

    async def load(self, user_id: str | None) -> None:
        self._set(is_loading=True, error=None)
        try:
            favourites = await self._store.list_favourites(user_id)
        except NotAuthenticatedError:
            self._set(error=LOAD_LOGIN_MESSAGE, favourites=[])
        except Exception as e:
            logger.error("Loading favourites for %s failed: %s", user_id, e)
            self._set(error=str(e) or LOAD_ERROR, favourites=[])
        else:
            self._set(favourites=list(favourites))
        finally:
            self._set(is_loading=False)

    async def delete(self, target: SavedFlight, user_id: str | None) -> ServiceResult[None]:
        """Delete ``target`` from the store, then drop it from the local list.

        The list is not re-fetched. A store that reports the document as
        already gone counts as success.
        """
        try:
            await self._store.delete_favourite(target.id, user_id)
        except DocumentNotFoundError:
            logger.info("Favourite %s was already deleted", target.id)
        except NotAuthenticatedError:
            self._set(error=DELETE_LOGIN_MESSAGE)
            return ServiceResult.fail("not_authenticated", DELETE_LOGIN_MESSAGE)
        except InvalidReferenceError:
            self._set(error=MISSING_ID_MESSAGE)
            return ServiceResult.fail("invalid_reference", MISSING_ID_MESSAGE)
        except Exception as e:
            logger.error("Deleting favourite %s failed: %s", target.id, e)
            message = str(e) or DELETE_ERROR
            self._set(error=message)
            return ServiceResult.fail("store_error", message)

        remaining = [f for f in self.state.favourites if f.id != target.id]
        self._set(favourites=remaining)
        return ServiceResult.ok(None)

    async def refresh_status(self) -> None:
        """Re-query the provider for every favourite and update statuses.

        Queries run concurrently. A favourite whose query fails, returns
        nothing, or returns a blank status keeps its previous status. The
        merged list, in original order, is committed in one update.
        """
        current = self.state.favourites
        if not current:
            return

        self._set(is_refreshing=True, error=None)
        try:
            outcomes = await asyncio.gather(*(self._fetch_status(s) for s in current))
            merged = [merge_status(saved, outcome) for saved, outcome in zip(current, outcomes)]
            self._set(favourites=merged)
            refreshed = sum(1 for o in outcomes if o.success)
            logger.info("Refreshed %d of %d favourite statuses", refreshed, len(current))
        except Exception:
            logger.exception("Favourite status refresh failed")
            self._set(error=REFRESH_ERROR)
        finally:
            self._set(is_refreshing=False)

    async def _fetch_status(self, saved: SavedFlight) -> ServiceResult[str]:
        try:
            records = await self._provider.get_flight_by_number(
                saved.flight_number, limit=TARGETED_LIMIT
            )
        except Exception as e:
            logger.warning("Status refresh for %s failed: %s", saved.flight_number, e)
            return ServiceResult.fail("provider_error", str(e), flight_number=saved.flight_number)

        if not records:
            return ServiceResult.fail("no_result", "No flight returned", flight_number=saved.flight_number)
        status = records[0].status
        if not status or not status.strip():
            return ServiceResult.fail("empty_status", "Provider returned no status", flight_number=saved.flight_number)
        return ServiceResult.ok(status)
