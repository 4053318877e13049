"""SavedFlight: a user's favourite flight snapshot.

Stored at: ``/users/{user_id}/favourites/{favourite_id}``

A point-in-time copy of a :class:`FlightRecord`, not a live reference.
Only ``status`` is ever changed after creation, and only in memory by the
status refresh.
"""

from __future__ import annotations

from typing import Any

from pydantic import field_validator

from flightboard.contracts.common import FirestoreModel
from flightboard.contracts.flight import FlightRecord


class SavedFlight(FirestoreModel):
    """Persisted favourite. Strings default to ``""`` so documents are uniform."""

    flight_number: str = ""
    airline_name: str = ""
    departure_airport: str = ""
    departure_iata: str = ""
    arrival_airport: str = ""
    arrival_iata: str = ""
    status: str = ""
    user_id: str = ""
    # Store-assigned document ID, never part of the document body
    id: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    def to_firestore(self) -> dict[str, Any]:
        data = super().to_firestore()
        if not data.get("id"):
            data.pop("id", None)
        return data

    @classmethod
    def from_record(cls, record: FlightRecord, user_id: str = "") -> "SavedFlight":
        """Snapshot a provider record; missing fields become ``""``."""
        dep = record.departure
        arr = record.arrival
        return cls(
            flight_number=record.flight_number or "",
            airline_name=record.airline_name or "",
            departure_airport=(dep.airport if dep else None) or "",
            departure_iata=(dep.iata if dep else None) or "",
            arrival_airport=(arr.airport if arr else None) or "",
            arrival_iata=(arr.iata if arr else None) or "",
            status=record.status or "",
            user_id=user_id,
        )
