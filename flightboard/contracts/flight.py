"""FlightRecord: one flight as reported by the remote provider.

Transient: parsed from an Aviationstack ``flights`` response and never stored
as-is. Every field is optional because the provider may omit any of them.
"""

from __future__ import annotations

from pydantic import Field

from flightboard.contracts.common import ProviderModel


class Airline(ProviderModel):
    name: str | None = None


class FlightIdent(ProviderModel):
    """Flight identifiers. ``number`` is what the UI shows and what we save."""

    number: str | None = None
    iata: str | None = None


class AirportLeg(ProviderModel):
    """Departure or arrival side of a flight."""

    airport: str | None = Field(default=None, description="Airport display name")
    iata: str | None = Field(default=None, description="IATA airport code")
    scheduled: str | None = Field(
        default=None, description="Scheduled time, ISO 8601 with offset"
    )
    delay: int | None = Field(default=None, description="Delay in minutes")


class FlightRecord(ProviderModel):
    """Single entry of the provider's ``data`` array."""

    flight_status: str | None = None
    airline: Airline | None = None
    flight: FlightIdent | None = None
    departure: AirportLeg | None = None
    arrival: AirportLeg | None = None

    @property
    def status(self) -> str | None:
        return self.flight_status

    @property
    def airline_name(self) -> str | None:
        return self.airline.name if self.airline else None

    @property
    def flight_number(self) -> str | None:
        return self.flight.number if self.flight else None


class FlightResponse(ProviderModel):
    """Top-level provider response. ``data`` may be missing or null."""

    data: list[FlightRecord] | None = None
