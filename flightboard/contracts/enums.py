"""Enumerations shared across Flightboard contracts."""

from enum import Enum


class FlightStatus(str, Enum):
    """Raw ``flight_status`` values reported by the provider.

    The provider field is free-form; these are the values we recognise.
    Anything else is passed through untouched.
    """
    SCHEDULED = "scheduled"
    ACTIVE = "active"
    LANDED = "landed"
    CANCELLED = "cancelled"


class DisplayStatus(str, Enum):
    """User-facing status labels."""
    ON_TIME = "On time"
    LANDED = "Landed"
    CANCELLED = "Cancelled"
    UNKNOWN = "Unknown"
