"""Zone API routes."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from api.params import EntityId, PageNumber, PageSize
from db import get_db
from repositories.zone_repository import (
    count_zones,
    create_zone as repo_create_zone,
    delete_zone as repo_delete_zone,
    get_zone,
    list_zones as repo_list_zones,
    update_zone as repo_update_zone,
)
from schemas.common import PagedResponse
from schemas.zones import ZoneCreate, ZoneResponse, ZoneUpdate
from utils.pagination import normalize_pagination, page_offset, to_paged
from utils.validators import check_zone_deletable, validate_zone

LOG = logging.getLogger(__name__)

BASE_PATH = "/api/zonas"

router = APIRouter(prefix="/zonas", tags=["zonas"])


def _zone_to_response(z) -> ZoneResponse:
    """Build ZoneResponse from model instance."""
    return ZoneResponse(id=z.id, nome=z.nome, letra=z.letra)


@router.get("", response_model=PagedResponse[ZoneResponse])
def list_zones(
    request: Request,
    page: PageNumber = 1,
    page_size: PageSize = 20,
    db: Session = Depends(get_db),
) -> PagedResponse:
    """List zones (paginated)."""
    page, page_size = normalize_pagination(page, page_size)
    total = count_zones(db)
    zones = repo_list_zones(db, page_offset(page, page_size), page_size)
    return to_paged(request, [_zone_to_response(z) for z in zones], page, page_size, total, BASE_PATH)


@router.get("/{zone_id}", response_model=ZoneResponse)
def get_zone_by_id(zone_id: EntityId, db: Session = Depends(get_db)) -> ZoneResponse:
    """Get a zone by id."""
    zone = get_zone(db, zone_id)
    if zone is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Zona não encontrada")
    return _zone_to_response(zone)


@router.post("", response_model=ZoneResponse, status_code=status.HTTP_201_CREATED)
def create_zone(body: ZoneCreate, response: Response, db: Session = Depends(get_db)) -> ZoneResponse:
    """Create a zone."""
    error = validate_zone(body.nome, body.letra)
    if error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)
    zone = repo_create_zone(db, nome=body.nome, letra=body.letra)
    LOG.info("Created zona %s (%s)", zone.id, zone.letra)
    response.headers["Location"] = f"{BASE_PATH}/{zone.id}"
    return _zone_to_response(zone)


@router.put("/{zone_id}", response_model=ZoneResponse)
def update_zone(zone_id: EntityId, body: ZoneUpdate, db: Session = Depends(get_db)) -> ZoneResponse:
    """Replace a zone's name and letter."""
    if get_zone(db, zone_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Zona não encontrada")
    error = validate_zone(body.nome, body.letra)
    if error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)
    zone = repo_update_zone(db, zone_id, nome=body.nome, letra=body.letra)
    LOG.info("Updated zona %s", zone_id)
    return _zone_to_response(zone)


@router.delete("/{zone_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_zone(zone_id: EntityId, db: Session = Depends(get_db)) -> None:
    """Delete a zone. Refused while motos are assigned to it."""
    if get_zone(db, zone_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Zona não encontrada")
    error = check_zone_deletable(db, zone_id)
    if error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)
    repo_delete_zone(db, zone_id)
    LOG.info("Deleted zona %s", zone_id)
