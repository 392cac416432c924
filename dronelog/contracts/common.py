"""Base classes and shared types for drone flight log contracts.

Conventions (all contracts and API payloads):
- **Coordinates**: WGS84 decimal degrees
- **Flight window**: ``"YYYY-MM-DD HH:MM"`` in the operator's local time
- **Wire keys**: camelCase where the collaborating services use it
  (``isValid``, ``warningNote``), declared as field aliases
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    """Base model with collaborator-friendly serialization.

    - Enums serialize as string values.
    - ``to_wire()`` produces a JSON-safe dict using the wire aliases.
    - ``from_wire()`` hydrates from a decoded JSON payload.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump to a JSON-compatible dict keyed by wire aliases."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> "WireModel":
        """Create model instance from a decoded JSON payload."""
        return cls.model_validate(data)


class Coordinates(BaseModel):
    """WGS84 point captured from the flight form."""

    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)

    model_config = ConfigDict(frozen=True)

    def as_text(self) -> str:
        """Human-readable ``"lat,lng"`` encoding."""
        return f"{self.lat},{self.lng}"
