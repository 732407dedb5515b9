"""Pydantic schemas for bin requests and responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BinCreateInput(BaseModel):
    """Body of ``POST /api/bins``. Emptiness is checked by the registry."""
    location: str | None = None
    type: str | None = None


class FillLevelInput(BaseModel):
    """Body of ``PUT /api/bins/<id>/fill``."""
    model_config = ConfigDict(populate_by_name=True)

    fill_level: int | None = Field(None, alias="fillLevel", description="Percentage between 0 and 100")

    @field_validator("fill_level", mode="before")
    @classmethod
    def reject_booleans(cls, value: object) -> object:
        """Refuse JSON booleans, which lax int parsing would turn into 0 or 1."""
        if isinstance(value, bool):
            msg = "Fill level must be an integer"
            raise ValueError(msg)
        return value


class BinOut(BaseModel):
    """A bin as returned by ``GET /api/bins``, including its derived status."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    location: str
    type: str
    fill_level: int
    status: str
    created_at: datetime
    updated_at: datetime
