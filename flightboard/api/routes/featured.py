"""Featured flights endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from flightboard.api.deps import get_featured_controller
from flightboard.api.presenters import present_featured
from flightboard.controllers.featured import FeaturedController

router = APIRouter(prefix="/featured", tags=["featured"])


@router.get("")
async def load_featured(
    controller: FeaturedController = Depends(get_featured_controller),
) -> dict:
    await controller.load_featured()
    data = present_featured(controller.state)
    data["airport"] = controller.airport
    return data
