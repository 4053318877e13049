"""Controller state snapshots.

Each controller exposes exactly one of these. Snapshots are frozen: a state
change always produces a new snapshot, so observers never see a partial update.
"""

from pydantic import BaseModel, ConfigDict, Field

from flightboard.contracts.favourite import SavedFlight
from flightboard.contracts.flight import FlightRecord


class ControllerState(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_loading: bool = False
    error: str | None = None


class SearchState(ControllerState):
    results: list[FlightRecord] = Field(default_factory=list)
    save_message: str | None = None


class FeaturedState(ControllerState):
    featured: list[FlightRecord] = Field(default_factory=list)


class FavouritesState(ControllerState):
    favourites: list[SavedFlight] = Field(default_factory=list)
    is_refreshing: bool = False
