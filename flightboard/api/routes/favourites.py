"""Favourite flight endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from flightboard.api.deps import get_current_user, get_favourites_controller
from flightboard.api.presenters import present_favourites
from flightboard.contracts.favourite import SavedFlight
from flightboard.controllers.favourites import FavouritesController

router = APIRouter(prefix="/favourites", tags=["favourites"])


def _require_user(user_id: str | None) -> str:
    if not user_id:
        raise HTTPException(status_code=401, detail="Please log in to view favourite flights.")
    return user_id


@router.get("")
async def list_favourites(
    user_id: str | None = Depends(get_current_user),
    controller: FavouritesController = Depends(get_favourites_controller),
) -> dict:
    await controller.load(_require_user(user_id))
    return present_favourites(controller.state)


@router.post("/refresh")
async def refresh_favourites(
    user_id: str | None = Depends(get_current_user),
    controller: FavouritesController = Depends(get_favourites_controller),
) -> dict:
    await controller.load(_require_user(user_id))
    await controller.refresh_status()
    return present_favourites(controller.state)


@router.delete("/{favourite_id}")
async def delete_favourite(
    favourite_id: str,
    user_id: str | None = Depends(get_current_user),
    controller: FavouritesController = Depends(get_favourites_controller),
) -> dict:
    """Reload, delete one favourite, and return the remaining list.

    Failures are reported in ``error``; the list is left as loaded.
    """
    await controller.load(_require_user(user_id))
    target = next(
        (f for f in controller.state.favourites if f.id == favourite_id),
        SavedFlight(id=favourite_id),
    )
    await controller.delete(target, user_id)
    return present_favourites(controller.state)
