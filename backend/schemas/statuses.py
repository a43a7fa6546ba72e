"""Pydantic schemas for status API."""
from typing import Optional

from pydantic import BaseModel, Field

from schemas.common import reference_id
from schemas.status_groups import StatusGroupResponse


class StatusCreate(BaseModel):
    """Payload for creating or replacing a status."""

    nome: str = Field(..., max_length=200)
    statusGrupoId: int = reference_id("Existing status group")


StatusUpdate = StatusCreate


class StatusSummary(BaseModel):
    """Status without its group (embedded in moto responses)."""

    id: int
    nome: str
    statusGrupoId: int


class StatusResponse(StatusSummary):
    """Status in API responses, with its group."""

    statusGrupo: Optional[StatusGroupResponse] = None
