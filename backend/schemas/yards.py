"""Pydantic schemas for yard (patio) API."""
from pydantic import BaseModel, Field


class YardCreate(BaseModel):
    """Payload for creating or replacing a yard."""

    nome: str = Field(..., max_length=200)


YardUpdate = YardCreate


class YardResponse(BaseModel):
    """Yard in API responses."""

    id: int
    nome: str
