"""FastAPI dependency injection wiring."""

from __future__ import annotations

from fastapi import Depends, Request

from flightboard.api.auth import UserClaims, optional_firebase_token
from flightboard.controllers.favourites import FavouritesController
from flightboard.controllers.featured import FeaturedController
from flightboard.controllers.search import SearchController
from flightboard.persistence.repositories.favourites_repo import FavouritesRepository
from flightboard.services.aviationstack_client import AviationStackClient

# ------------------------------------------------------------------
# Current user
# ------------------------------------------------------------------


def get_current_user(
    claims: UserClaims | None = Depends(optional_firebase_token),
) -> str | None:
    """Return the signed-in user ID, or None for an anonymous caller."""
    return claims.uid if claims else None


# ------------------------------------------------------------------
# Adapters
# ------------------------------------------------------------------


def get_flight_provider(request: Request) -> AviationStackClient:
    """Shared provider client, created at startup (see app lifespan)."""
    return request.app.state.flight_provider


def get_favourites_repo() -> FavouritesRepository:
    return FavouritesRepository()


# ------------------------------------------------------------------
# Controllers (one per request, like one per screen entry)
# ------------------------------------------------------------------


def get_search_controller(
    provider: AviationStackClient = Depends(get_flight_provider),
    store: FavouritesRepository = Depends(get_favourites_repo),
) -> SearchController:
    return SearchController(provider, store)


def get_featured_controller(
    provider: AviationStackClient = Depends(get_flight_provider),
) -> FeaturedController:
    return FeaturedController(provider)


def get_favourites_controller(
    provider: AviationStackClient = Depends(get_flight_provider),
    store: FavouritesRepository = Depends(get_favourites_repo),
) -> FavouritesController:
    return FavouritesController(provider, store)
