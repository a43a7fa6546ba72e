"""Yard (patio) API routes."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from api.params import EntityId, PageNumber, PageSize
from db import get_db
from repositories.yard_repository import (
    count_yards,
    create_yard as repo_create_yard,
    delete_yard as repo_delete_yard,
    get_yard,
    list_yards as repo_list_yards,
    update_yard as repo_update_yard,
)
from schemas.common import PagedResponse
from schemas.yards import YardCreate, YardResponse, YardUpdate
from utils.pagination import normalize_pagination, page_offset, to_paged
from utils.validators import check_yard_deletable, validate_name

LOG = logging.getLogger(__name__)

BASE_PATH = "/api/patios"

router = APIRouter(prefix="/patios", tags=["patios"])


@router.get("", response_model=PagedResponse[YardResponse])
def list_yards(
    request: Request,
    page: PageNumber = 1,
    page_size: PageSize = 20,
    db: Session = Depends(get_db),
) -> PagedResponse:
    """List yards (paginated)."""
    page, page_size = normalize_pagination(page, page_size)
    total = count_yards(db)
    yards = repo_list_yards(db, page_offset(page, page_size), page_size)
    items = [YardResponse(id=y.id, nome=y.nome) for y in yards]
    return to_paged(request, items, page, page_size, total, BASE_PATH)


@router.get("/{yard_id}", response_model=YardResponse)
def get_yard_by_id(yard_id: EntityId, db: Session = Depends(get_db)) -> YardResponse:
    """Get a yard by id."""
    yard = get_yard(db, yard_id)
    if yard is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pátio não encontrado")
    return YardResponse(id=yard.id, nome=yard.nome)


@router.post("", response_model=YardResponse, status_code=status.HTTP_201_CREATED)
def create_yard(body: YardCreate, response: Response, db: Session = Depends(get_db)) -> YardResponse:
    """Create a yard."""
    error = validate_name(body.nome)
    if error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)
    yard = repo_create_yard(db, nome=body.nome)
    LOG.info("Created patio %s", yard.id)
    response.headers["Location"] = f"{BASE_PATH}/{yard.id}"
    return YardResponse(id=yard.id, nome=yard.nome)


@router.put("/{yard_id}", response_model=YardResponse)
def update_yard(yard_id: EntityId, body: YardUpdate, db: Session = Depends(get_db)) -> YardResponse:
    """Rename a yard."""
    if get_yard(db, yard_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pátio não encontrado")
    error = validate_name(body.nome)
    if error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)
    yard = repo_update_yard(db, yard_id, nome=body.nome)
    LOG.info("Updated patio %s", yard_id)
    return YardResponse(id=yard.id, nome=yard.nome)


@router.delete("/{yard_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_yard(yard_id: EntityId, db: Session = Depends(get_db)) -> None:
    """Delete a yard. Refused while motos are parked in it."""
    if get_yard(db, yard_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pátio não encontrado")
    error = check_yard_deletable(db, yard_id)
    if error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)
    repo_delete_yard(db, yard_id)
    LOG.info("Deleted patio %s", yard_id)
