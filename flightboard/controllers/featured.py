"""Featured flights for the landing view."""

from __future__ import annotations

import logging
import os
from typing import Sequence

from flightboard.contracts.flight import FlightRecord
from flightboard.contracts.state import FeaturedState
from flightboard.controllers.base import BaseController
from flightboard.services.protocols import AIRPORT_FEED_LIMIT, FlightProvider

logger = logging.getLogger(__name__)

DEFAULT_FEATURED_AIRPORT = "YWG"
FEATURED_ERROR = "Failed to load Featured Flights."


def select_featured(
    departures: Sequence[FlightRecord], arrivals: Sequence[FlightRecord]
) -> list[FlightRecord]:
    """Up to two departures, then the first arrival if there is one."""
    selected = list(departures[:2])
    if arrivals:
        selected.append(arrivals[0])
    return selected


class FeaturedController(BaseController[FeaturedState]):
    """Backs the home screen's featured flights.

    Both feeds must load; if either fails nothing is shown.
    """

    def __init__(self, provider: FlightProvider, airport_iata: str | None = None):
        super().__init__(FeaturedState())
        self._provider = provider
        self._airport = airport_iata or os.getenv(
            "FLIGHTBOARD_FEATURED_AIRPORT", DEFAULT_FEATURED_AIRPORT
        )

    @property
    def airport(self) -> str:
        return self._airport

    async def load_featured(self) -> None:
        self._set(is_loading=True, error=None, featured=[])
        try:
            departures = await self._provider.get_departures_from(
                self._airport, limit=AIRPORT_FEED_LIMIT
            )
            arrivals = await self._provider.get_arrivals_to(
                self._airport, limit=AIRPORT_FEED_LIMIT
            )
            self._set(featured=select_featured(departures, arrivals))
        except Exception as e:
            logger.error("Featured flights for %s failed: %s", self._airport, e)
            self._set(featured=[], error=FEATURED_ERROR)
        finally:
            self._set(is_loading=False)
