"""Pure helpers for normalising user input and rendering flight fields.

No I/O here; everything is deterministic and safe on missing data.
"""

from __future__ import annotations

from datetime import datetime

from flightboard.contracts.enums import DisplayStatus, FlightStatus
from flightboard.contracts.flight import FlightRecord

_STATUS_LABELS = {
    FlightStatus.CANCELLED.value: DisplayStatus.CANCELLED.value,
    FlightStatus.LANDED.value: DisplayStatus.LANDED.value,
    FlightStatus.ACTIVE.value: DisplayStatus.ON_TIME.value,
    FlightStatus.SCHEDULED.value: DisplayStatus.ON_TIME.value,
}


def derive_status(raw: str | None) -> str:
    """Map a raw provider status to its display label.

    Recognised tokens match case-insensitively. Unrecognised values are
    returned unchanged; empty or missing becomes ``"Unknown"``.
    """
    if not raw:
        return DisplayStatus.UNKNOWN.value
    return _STATUS_LABELS.get(raw.lower(), raw)


def normalize_flight_number(raw: str) -> str:
    """``" ac 430 "`` -> ``"AC430"``: drop all whitespace, upper-case."""
    return "".join(raw.split()).upper()


def normalize_iata(raw: str) -> str:
    """``" ywg "`` -> ``"YWG"``: trim, upper-case."""
    return raw.strip().upper()


def format_departure_time(iso: str | None) -> str:
    """Format an ISO 8601 timestamp as wall-clock time, e.g. ``"8:05 PM"``.

    The time is shown in the timestamp's own offset. Returns ``""`` when the
    value is missing, unparsable, or carries no offset.
    """
    if not iso or not iso.strip():
        return ""
    try:
        dt = datetime.fromisoformat(iso.strip().replace("Z", "+00:00"))
    except ValueError:
        return ""
    if dt.tzinfo is None:
        return ""
    hour = dt.hour % 12 or 12
    suffix = "AM" if dt.hour < 12 else "PM"
    return f"{hour}:{dt.minute:02d} {suffix}"


def describe_airport(name: str | None, iata: str | None) -> str:
    """``"Winnipeg International (YWG)"``."""
    return f"{name or 'Unknown Airport'} ({iata or ''})"


def describe_flight(record: FlightRecord) -> str:
    """``"Air Canada - AC430"``."""
    airline = record.airline_name or "Unknown airline"
    number = record.flight_number or "Unknown number"
    return f"{airline} - {number}"
