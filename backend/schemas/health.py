"""Health check response schema."""
from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response for GET /api/health. status is degraded when the database does not answer."""

    status: Literal["ok", "degraded"] = "ok"
    service: str = "yard-fleet-api"
    database: Literal["ok", "unavailable"] = "ok"
