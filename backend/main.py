"""Yard Fleet API: FastAPI backend for tracking motos across yards."""
import logging

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from utils.config import CORS_ORIGINS, LOG_LEVEL, PORT

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

from api.motos import router as motos_router
from api.status_groups import router as status_groups_router
from api.statuses import router as statuses_router
from api.users import router as users_router
from api.yards import router as yards_router
from api.zones import router as zones_router
from db import get_db
from schemas.health import HealthResponse

LOG = logging.getLogger(__name__)

app = FastAPI(
    title="Yard Fleet API",
    description="Motorcycle tracking across yards, zones and statuses",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials="*" not in CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(users_router, prefix="/api")
app.include_router(zones_router, prefix="/api")
app.include_router(yards_router, prefix="/api")
app.include_router(status_groups_router, prefix="/api")
app.include_router(statuses_router, prefix="/api")
app.include_router(motos_router, prefix="/api")


def _first_error_message(exc: RequestValidationError) -> str:
    """Human-readable message for the first invalid field."""
    errors = exc.errors()
    if not errors:
        return "Requisição inválida."
    err = errors[0]
    field = ".".join(str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path"))
    return f"{field}: {err.get('msg')}" if field else str(err.get("msg"))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed payloads and parameters are bad requests, like failed referential checks."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": _first_error_message(exc)},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    LOG.error("Unhandled exception on %s %s: %s", request.method, request.url.path, exc, exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


@app.get("/api/health", response_model=HealthResponse)
def api_health(db: Session = Depends(get_db)) -> HealthResponse:
    """Service liveness plus a SELECT 1 round-trip to the database."""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        LOG.warning("Health check: database unavailable: %s", exc)
        return HealthResponse(status="degraded", database="unavailable")
    return HealthResponse()


@app.on_event("startup")
def startup() -> None:
    """Schema and seed data are managed outside the app (alembic upgrade head, scripts/seed_db.py)."""
    LOG.info("Yard Fleet API starting; docs at /docs")


@app.get("/")
def root() -> dict:
    """Root redirect/info."""
    return {"service": "yard-fleet-api", "docs": "/docs", "health": "/api/health"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=PORT)
