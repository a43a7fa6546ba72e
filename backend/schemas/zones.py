"""Pydantic schemas for zone API."""
from pydantic import BaseModel, Field


class ZoneCreate(BaseModel):
    """Payload for creating or replacing a zone. letra must be a single character."""

    nome: str = Field(..., max_length=50)
    letra: str


ZoneUpdate = ZoneCreate


class ZoneResponse(BaseModel):
    """Zone in API responses."""

    id: int
    nome: str
    letra: str
