"""Pydantic schemas for pickup requests and pickup log responses."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_serializer

if TYPE_CHECKING:
    from bins.models import PickupLog


class PickupInput(BaseModel):
    """Body of ``POST /api/bins/<id>/pickup``. The sign is checked by the ledger."""
    model_config = ConfigDict(populate_by_name=True)

    collected_weight: Decimal | None = Field(None, alias="collectedWeight", description="Weight in kilograms")


class PickupOut(BaseModel):
    """A pickup log joined with its bin's location and type."""
    id: int
    bin_id: int
    collected_kg: Decimal
    pickup_time: datetime
    location: str
    type: str

    @classmethod
    def from_log(cls, log: PickupLog) -> PickupOut:
        """Build the response row from a log whose ``bin`` is already loaded."""
        return cls(
            id=log.id,
            bin_id=log.bin_id,
            collected_kg=log.collected_kg,
            pickup_time=log.pickup_time,
            location=log.bin.location,
            type=log.bin.type,
        )

    @field_serializer("collected_kg")
    def serialize_collected_kg(self, collected_kg: Decimal) -> float:
        """Emit the weight as a JSON number rather than a string."""
        return float(collected_kg)
