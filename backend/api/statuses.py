"""Status API routes."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from api.params import EntityId, PageNumber, PageSize
from db import get_db
from repositories.status_repository import (
    count_statuses,
    create_status as repo_create_status,
    delete_status as repo_delete_status,
    get_status,
    list_statuses as repo_list_statuses,
    update_status as repo_update_status,
)
from schemas.common import PagedResponse
from schemas.status_groups import StatusGroupResponse
from schemas.statuses import StatusCreate, StatusResponse, StatusUpdate
from utils.pagination import normalize_pagination, page_offset, to_paged
from utils.validators import check_status_deletable, validate_status

LOG = logging.getLogger(__name__)

BASE_PATH = "/api/statuses"
NOT_FOUND = "Status não encontrado"

router = APIRouter(prefix="/statuses", tags=["statuses"])


def _status_to_response(s) -> StatusResponse:
    """Build StatusResponse (with group summary) from model instance."""
    group = s.status_grupo
    return StatusResponse(
        id=s.id,
        nome=s.nome,
        statusGrupoId=s.status_grupo_id,
        statusGrupo=StatusGroupResponse(id=group.id, nome=group.nome) if group is not None else None,
    )


@router.get("", response_model=PagedResponse[StatusResponse])
def list_statuses(
    request: Request,
    page: PageNumber = 1,
    page_size: PageSize = 20,
    db: Session = Depends(get_db),
) -> PagedResponse:
    """List statuses (paginated), each with its group."""
    page, page_size = normalize_pagination(page, page_size)
    total = count_statuses(db)
    rows = repo_list_statuses(db, page_offset(page, page_size), page_size)
    return to_paged(request, [_status_to_response(s) for s in rows], page, page_size, total, BASE_PATH)


@router.get("/{status_id}", response_model=StatusResponse)
def get_status_by_id(status_id: EntityId, db: Session = Depends(get_db)) -> StatusResponse:
    """Get a status by id."""
    row = get_status(db, status_id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return _status_to_response(row)


@router.post("", response_model=StatusResponse, status_code=status.HTTP_201_CREATED)
def create_status(body: StatusCreate, response: Response, db: Session = Depends(get_db)) -> StatusResponse:
    """Create a status inside an existing group."""
    error = validate_status(db, nome=body.nome, status_grupo_id=body.statusGrupoId)
    if error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)
    row = repo_create_status(db, nome=body.nome, status_grupo_id=body.statusGrupoId)
    LOG.info("Created status %s in grupo %s", row.id, row.status_grupo_id)
    response.headers["Location"] = f"{BASE_PATH}/{row.id}"
    return _status_to_response(row)


@router.put("/{status_id}", response_model=StatusResponse)
def update_status(status_id: EntityId, body: StatusUpdate, db: Session = Depends(get_db)) -> StatusResponse:
    """Replace a status' name and group."""
    if get_status(db, status_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    error = validate_status(db, nome=body.nome, status_grupo_id=body.statusGrupoId)
    if error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)
    row = repo_update_status(db, status_id, nome=body.nome, status_grupo_id=body.statusGrupoId)
    LOG.info("Updated status %s", status_id)
    return _status_to_response(row)


@router.delete("/{status_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_status(status_id: EntityId, db: Session = Depends(get_db)) -> None:
    """Delete a status. Refused while motos are in it."""
    if get_status(db, status_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    error = check_status_deletable(db, status_id)
    if error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)
    repo_delete_status(db, status_id)
    LOG.info("Deleted status %s", status_id)
