"""Pydantic schema for the dashboard statistics."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel


class BinStats(BaseModel):
    """Point-in-time counters over bins and pickups.

    Serialized with camelCase keys (``totalBins``, ``totalWeightCollected``...)
    when dumped ``by_alias``.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_bins: int = Field(..., ge=0)
    full_bins: int = Field(..., ge=0)
    empty_bins: int = Field(..., ge=0)
    total_pickups: int = Field(..., ge=0)
    total_weight_collected: Decimal = Field(Decimal("0"), ge=0)

    @field_serializer("total_weight_collected")
    def serialize_total_weight(self, total: Decimal) -> float:
        """Emit the total as a JSON number rather than a string."""
        return float(total)
