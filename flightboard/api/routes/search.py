"""Flight search endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from flightboard.api.deps import get_current_user, get_search_controller
from flightboard.api.presenters import present_search
from flightboard.contracts.flight import FlightRecord
from flightboard.controllers.search import SearchController

router = APIRouter(prefix="/search", tags=["search"])


@router.get("/number")
async def search_by_number(
    q: str = Query(..., min_length=1, description="Flight number, e.g. AC430"),
    controller: SearchController = Depends(get_search_controller),
) -> dict:
    await controller.search_by_number(q)
    return present_search(controller.state)


@router.get("/route")
async def search_by_route(
    dep: str = Query(..., min_length=1, description="Departure IATA code"),
    arr: str = Query(..., min_length=1, description="Arrival IATA code"),
    controller: SearchController = Depends(get_search_controller),
) -> dict:
    await controller.search_by_route(dep, arr)
    return present_search(controller.state)


@router.post("/favourites")
async def save_to_favourites(
    record: FlightRecord,
    user_id: str | None = Depends(get_current_user),
    controller: SearchController = Depends(get_search_controller),
) -> dict:
    """Save a search result. The outcome is reported in ``save_message``."""
    await controller.save_to_favourites(record, user_id)
    return present_search(controller.state)
