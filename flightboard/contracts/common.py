"""Base classes and shared types for Flightboard contracts.

Conventions (all contracts and API responses):
- **Airport codes**: IATA, upper-case (``"YWG"``)
- **Flight numbers**: IATA flight designator, upper-case, no spaces (``"AC430"``)
- **Timestamps**: ISO 8601 strings with offset, kept as received from the provider

Provider payloads may omit any field, so provider-sourced contracts make
everything optional. Persisted contracts default strings to ``""`` instead.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class FirestoreModel(BaseModel):
    """Base model with Firestore-friendly serialization.

    - Enums serialize as string values (Firestore stores strings).
    - ``to_firestore()`` produces a JSON-safe dict.
    - ``from_firestore()`` hydrates from a Firestore document dict.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_firestore(self) -> dict[str, Any]:
        """Dump to Firestore-compatible dict."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_firestore(cls, data: dict[str, Any]) -> "FirestoreModel":
        """Create model instance from Firestore document dict."""
        return cls.model_validate(data)


class ProviderModel(BaseModel):
    """Base model for provider payloads.

    Unknown keys are ignored; the provider returns far more than we use.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )
