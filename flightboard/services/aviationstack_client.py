"""Aviationstack ``flights`` endpoint client."""

from __future__ import annotations

import logging
import os
from typing import Any

import httpx
from pydantic import ValidationError

from flightboard.contracts.flight import FlightRecord, FlightResponse
from flightboard.services.errors import ProviderError
from flightboard.services.protocols import AIRPORT_FEED_LIMIT, TARGETED_LIMIT

logger = logging.getLogger(__name__)

BASE_URL = os.getenv("AVIATIONSTACK_BASE_URL", "http://api.aviationstack.com/v1")
AVIATIONSTACK_API_KEY = os.getenv("AVIATIONSTACK_API_KEY", "")


class AviationStackClient:
    """Async HTTP client for Aviationstack flight queries.

    All four queries hit the same ``flights`` endpoint with different
    filters. Parameters are sent as given; callers normalise them.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        api_key: str | None = None,
        base_url: str = BASE_URL,
    ):
        self._client = http_client or httpx.AsyncClient(timeout=15.0)
        self._api_key = AVIATIONSTACK_API_KEY if api_key is None else api_key
        self._url = f"{base_url.rstrip('/')}/flights"

    async def get_flight_by_number(
        self, flight_number: str, limit: int = TARGETED_LIMIT
    ) -> list[FlightRecord]:
        return await self._query(
            "get_flight_by_number", {"flight_iata": flight_number, "limit": limit}
        )

    async def get_flights_by_route(
        self, dep_iata: str, arr_iata: str, limit: int = TARGETED_LIMIT
    ) -> list[FlightRecord]:
        return await self._query(
            "get_flights_by_route",
            {"dep_iata": dep_iata, "arr_iata": arr_iata, "limit": limit},
        )

    async def get_departures_from(
        self, airport_iata: str, limit: int = AIRPORT_FEED_LIMIT
    ) -> list[FlightRecord]:
        return await self._query(
            "get_departures_from", {"dep_iata": airport_iata, "limit": limit}
        )

    async def get_arrivals_to(
        self, airport_iata: str, limit: int = AIRPORT_FEED_LIMIT
    ) -> list[FlightRecord]:
        return await self._query(
            "get_arrivals_to", {"arr_iata": airport_iata, "limit": limit}
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _query(self, operation: str, params: dict[str, Any]) -> list[FlightRecord]:
        try:
            resp = await self._client.get(
                self._url, params={"access_key": self._api_key, **params}
            )
            resp.raise_for_status()
            payload = resp.json()
        except httpx.HTTPError as e:
            raise ProviderError(operation, str(e)) from e
        except ValueError as e:
            raise ProviderError(operation, "response is not JSON") from e

        records = _parse_flights(operation, payload)
        logger.info("%s %s -> %d flights", operation, params, len(records))
        return records


def _parse_flights(operation: str, payload: Any) -> list[FlightRecord]:
    """Parse a ``flights`` response body. Missing ``data`` means no flights."""
    if not isinstance(payload, dict):
        raise ProviderError(operation, "unexpected payload shape")

    # Aviationstack reports some errors (bad key, quota) with a 200 status
    error = payload.get("error")
    if error:
        message = error.get("message") if isinstance(error, dict) else str(error)
        raise ProviderError(operation, message or "provider error")

    try:
        response = FlightResponse.model_validate(payload)
    except ValidationError as e:
        raise ProviderError(operation, "malformed flight data") from e
    return response.data or []
