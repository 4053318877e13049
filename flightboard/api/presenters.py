"""Response shaping: controller state plus derived display fields."""

from __future__ import annotations

from typing import Any

from flightboard.contracts.flight import FlightRecord
from flightboard.contracts.state import FavouritesState, FeaturedState, SearchState
from flightboard.services.flight_display import (
    derive_status,
    describe_airport,
    describe_flight,
    format_departure_time,
)


def present_flight(record: FlightRecord) -> dict[str, Any]:
    data = record.model_dump(mode="json")
    dep = record.departure
    arr = record.arrival
    data["display"] = {
        "status": derive_status(record.status),
        "flight": describe_flight(record),
        "departure": describe_airport(dep.airport if dep else None, dep.iata if dep else None),
        "arrival": describe_airport(arr.airport if arr else None, arr.iata if arr else None),
        "departure_time": format_departure_time(dep.scheduled if dep else None),
    }
    return data


def present_search(state: SearchState) -> dict[str, Any]:
    data = state.model_dump(mode="json", exclude={"results"})
    data["results"] = [present_flight(r) for r in state.results]
    return data


def present_featured(state: FeaturedState) -> dict[str, Any]:
    data = state.model_dump(mode="json", exclude={"featured"})
    data["featured"] = [present_flight(r) for r in state.featured]
    return data


def present_favourites(state: FavouritesState) -> dict[str, Any]:
    data = state.model_dump(mode="json", exclude={"favourites"})
    data["favourites"] = [
        {**f.model_dump(mode="json"), "display_status": derive_status(f.status)}
        for f in state.favourites
    ]
    return data
