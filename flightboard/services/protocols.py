"""Interfaces the controllers depend on.

Concrete adapters live in ``flightboard.services.aviationstack_client`` and
``flightboard.persistence.repositories.favourites_repo``; tests substitute
in-memory fakes.
"""

from __future__ import annotations

from typing import Protocol

from flightboard.contracts.favourite import SavedFlight
from flightboard.contracts.flight import FlightRecord

TARGETED_LIMIT = 5
AIRPORT_FEED_LIMIT = 10


class FlightProvider(Protocol):
    """Read-only remote flight data. Results keep the provider's order."""

    async def get_flight_by_number(
        self, flight_number: str, limit: int = TARGETED_LIMIT
    ) -> list[FlightRecord]:
        """Flights matching an IATA flight designator (e.g. ``AC430``)."""
        ...

    async def get_flights_by_route(
        self, dep_iata: str, arr_iata: str, limit: int = TARGETED_LIMIT
    ) -> list[FlightRecord]:
        """Flights from ``dep_iata`` to ``arr_iata``."""
        ...

    async def get_departures_from(
        self, airport_iata: str, limit: int = AIRPORT_FEED_LIMIT
    ) -> list[FlightRecord]:
        ...

    async def get_arrivals_to(
        self, airport_iata: str, limit: int = AIRPORT_FEED_LIMIT
    ) -> list[FlightRecord]:
        ...


class FavouritesStore(Protocol):
    """Per-user persistent favourites.

    All methods raise ``NotAuthenticatedError`` when ``owner_id`` is empty.
    """

    async def add_favourite(self, saved: SavedFlight, owner_id: str | None) -> str:
        """Persist and return the store-assigned ID."""
        ...

    async def list_favourites(self, owner_id: str | None) -> list[SavedFlight]:
        """Every saved flight of ``owner_id``, each carrying its ID."""
        ...

    async def delete_favourite(self, doc_id: str | None, owner_id: str | None) -> None:
        """Remove by ID. Raises ``InvalidReferenceError`` on a blank ID."""
        ...
