"""Flightboard data contracts, Pydantic v2 models.

Data authority
--------------

**Firestore** (source of truth for user-owned data):
- ``SavedFlight``: ``/users/{uid}/favourites/{id}``

**Aviationstack** (live, read-only, never persisted as-is):
- ``FlightRecord``: one entry of a ``flights`` query

Calculated (never persisted)
----------------------------
- Display status and formatted times (``flightboard.services.flight_display``)
- Controller state snapshots (``SearchState``, ``FeaturedState``, ``FavouritesState``)
- Refreshed favourite statuses
"""

from flightboard.contracts.enums import DisplayStatus, FlightStatus
from flightboard.contracts.common import FirestoreModel, ProviderModel
from flightboard.contracts.result import ServiceError, ServiceResult
from flightboard.contracts.flight import (
    Airline,
    AirportLeg,
    FlightIdent,
    FlightRecord,
    FlightResponse,
)
from flightboard.contracts.favourite import SavedFlight
from flightboard.contracts.state import (
    ControllerState,
    FavouritesState,
    FeaturedState,
    SearchState,
)

__all__ = [
    # Enums
    "DisplayStatus",
    "FlightStatus",
    # Common
    "FirestoreModel",
    "ProviderModel",
    # Result
    "ServiceError",
    "ServiceResult",
    # Domain models
    "Airline",
    "AirportLeg",
    "FlightIdent",
    "FlightRecord",
    "FlightResponse",
    "SavedFlight",
    # Controller state
    "ControllerState",
    "FavouritesState",
    "FeaturedState",
    "SearchState",
]
