"""Pydantic schemas for moto API."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from schemas.common import reference_id
from schemas.statuses import StatusSummary
from schemas.yards import YardResponse
from schemas.zones import ZoneResponse


class MotoCreate(BaseModel):
    """Payload for creating or replacing a moto. zonaId, patioId and statusId must exist."""

    placa: str = Field(..., min_length=1, max_length=10)
    chassi: str = Field(..., min_length=1, max_length=20)
    qrCode: Optional[str] = Field(None, max_length=255)
    dataEntrada: datetime
    previsaoEntrega: Optional[datetime] = None
    fotos: Optional[str] = Field(None, max_length=255)
    zonaId: int = reference_id("Existing zone")
    patioId: int = reference_id("Existing yard")
    statusId: int = reference_id("Existing status")
    observacoes: Optional[str] = None


MotoUpdate = MotoCreate


class MotoResponse(BaseModel):
    """Moto in API responses, with zone, yard and status summaries."""

    id: int
    placa: str
    chassi: str
    qrCode: Optional[str] = None
    dataEntrada: datetime
    previsaoEntrega: Optional[datetime] = None
    fotos: Optional[str] = None
    zonaId: int
    patioId: int
    statusId: int
    observacoes: Optional[str] = None
    zona: Optional[ZoneResponse] = None
    patio: Optional[YardResponse] = None
    status: Optional[StatusSummary] = None
