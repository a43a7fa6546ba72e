"""Pydantic schemas for status group API."""
from pydantic import BaseModel, Field


class StatusGroupCreate(BaseModel):
    """Payload for creating or replacing a status group."""

    nome: str = Field(..., max_length=200)


StatusGroupUpdate = StatusGroupCreate


class StatusGroupResponse(BaseModel):
    """Status group in list responses."""

    id: int
    nome: str


class GroupStatusItem(BaseModel):
    """Status listed under its group."""

    id: int
    nome: str


class StatusGroupDetail(StatusGroupResponse):
    """Status group by id, with its statuses."""

    statuses: list[GroupStatusItem] = []
