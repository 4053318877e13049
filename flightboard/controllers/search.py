"""Flight search by number or route, and saving results to favourites."""

from __future__ import annotations

import logging

from flightboard.contracts.favourite import SavedFlight
from flightboard.contracts.flight import FlightRecord
from flightboard.contracts.result import ServiceResult
from flightboard.contracts.state import SearchState
from flightboard.controllers.base import BaseController
from flightboard.persistence.errors import NotAuthenticatedError
from flightboard.services.flight_display import normalize_flight_number, normalize_iata
from flightboard.services.protocols import TARGETED_LIMIT, FavouritesStore, FlightProvider

logger = logging.getLogger(__name__)

SAVED_MESSAGE = "Flight has been saved to favourites."
LOGIN_REQUIRED_MESSAGE = "You must be logged in to add to your Favourites."
NUMBER_SEARCH_ERROR = "Error searching by flight number."
ROUTE_SEARCH_ERROR = "Error searching by route."


class SearchController(BaseController[SearchState]):
    """Backs the search screen.

    Every search clears previous results and error, then fills exactly one
    of ``results`` or ``error``. ``is_loading`` is cleared on every exit path.
    """

    def __init__(self, provider: FlightProvider, store: FavouritesStore):
        super().__init__(SearchState())
        self._provider = provider
        self._store = store

    async def search_by_number(self, raw: str) -> None:
        cleaned = normalize_flight_number(raw)
        self._set(is_loading=True, error=None, results=[])
        try:
            records = await self._provider.get_flight_by_number(cleaned, limit=TARGETED_LIMIT)
            if not records:
                self._set(error=f'No flights found for "{cleaned}".')
            else:
                self._set(results=list(records))
        except Exception as e:
            logger.error("Flight number search for %s failed: %s", cleaned, e)
            self._set(error=NUMBER_SEARCH_ERROR)
        finally:
            self._set(is_loading=False)

    async def search_by_route(self, dep_raw: str, arr_raw: str) -> None:
        dep = normalize_iata(dep_raw)
        arr = normalize_iata(arr_raw)
        self._set(is_loading=True, error=None, results=[])
        try:
            records = await self._provider.get_flights_by_route(dep, arr, limit=TARGETED_LIMIT)
            if not records:
                self._set(error=f"No flights found for {dep} to {arr}")
            else:
                self._set(results=list(records))
        except Exception as e:
            logger.error("Route search %s-%s failed: %s", dep, arr, e)
            self._set(error=ROUTE_SEARCH_ERROR)
        finally:
            self._set(is_loading=False)

    async def save_to_favourites(
        self, record: FlightRecord, user_id: str | None
    ) -> ServiceResult[str]:
        """Snapshot ``record`` into the user's favourites.

        Never raises; the outcome is reported through ``save_message`` and
        the returned result (``data`` is the new favourite ID).
        """
        if not user_id:
            self._set(save_message=LOGIN_REQUIRED_MESSAGE)
            return ServiceResult.fail("not_authenticated", LOGIN_REQUIRED_MESSAGE)

        saved = SavedFlight.from_record(record, user_id=user_id)
        try:
            doc_id = await self._store.add_favourite(saved, user_id)
        except NotAuthenticatedError:
            self._set(save_message=LOGIN_REQUIRED_MESSAGE)
            return ServiceResult.fail("not_authenticated", LOGIN_REQUIRED_MESSAGE)
        except Exception as e:
            logger.error("Saving %s for %s failed: %s", saved.flight_number, user_id, e)
            message = f"Failed to save: {e}"
            self._set(save_message=message)
            return ServiceResult.fail("store_error", message)

        self._set(save_message=SAVED_MESSAGE)
        return ServiceResult.ok(doc_id)

    def clear_save_message(self) -> None:
        self._set(save_message=None)
