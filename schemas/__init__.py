"""Pydantic schemas for the Smart Waste API."""

from .bin import BinCreateInput, BinOut, FillLevelInput
from .messages import BinCreatedResponse, MessageResponse
from .pickup import PickupInput, PickupOut
from .stats import BinStats

__all__ = [
    "BinCreateInput",
    "BinCreatedResponse",
    "BinOut",
    "BinStats",
    "FillLevelInput",
    "MessageResponse",
    "PickupInput",
    "PickupOut",
]
