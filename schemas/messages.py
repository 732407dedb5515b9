"""Pydantic schemas for the small acknowledgement bodies returned by the API."""

from __future__ import annotations

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """A human-readable status message; also the body of every error response."""
    message: str


class BinCreatedResponse(MessageResponse):
    """Acknowledgement for a newly registered bin."""
    id: int
