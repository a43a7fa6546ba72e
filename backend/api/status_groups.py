"""Status group API routes."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from api.params import EntityId, PageNumber, PageSize
from db import get_db
from repositories.status_group_repository import (
    count_status_groups,
    create_status_group as repo_create_status_group,
    delete_status_group as repo_delete_status_group,
    get_status_group,
    list_status_groups as repo_list_status_groups,
    update_status_group as repo_update_status_group,
)
from schemas.common import PagedResponse
from schemas.status_groups import (
    GroupStatusItem,
    StatusGroupCreate,
    StatusGroupDetail,
    StatusGroupResponse,
    StatusGroupUpdate,
)
from utils.pagination import normalize_pagination, page_offset, to_paged
from utils.validators import check_status_group_deletable, validate_name

LOG = logging.getLogger(__name__)

BASE_PATH = "/api/statusgrupos"
NOT_FOUND = "StatusGrupo não encontrado"

router = APIRouter(prefix="/statusgrupos", tags=["statusgrupos"])


@router.get("", response_model=PagedResponse[StatusGroupResponse])
def list_status_groups(
    request: Request,
    page: PageNumber = 1,
    page_size: PageSize = 20,
    db: Session = Depends(get_db),
) -> PagedResponse:
    """List status groups (paginated)."""
    page, page_size = normalize_pagination(page, page_size)
    total = count_status_groups(db)
    groups = repo_list_status_groups(db, page_offset(page, page_size), page_size)
    items = [StatusGroupResponse(id=g.id, nome=g.nome) for g in groups]
    return to_paged(request, items, page, page_size, total, BASE_PATH)


@router.get("/{group_id}", response_model=StatusGroupDetail)
def get_status_group_by_id(group_id: EntityId, db: Session = Depends(get_db)) -> StatusGroupDetail:
    """Get a status group by id, with its statuses."""
    group = get_status_group(db, group_id, with_statuses=True)
    if group is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return StatusGroupDetail(
        id=group.id,
        nome=group.nome,
        statuses=[GroupStatusItem(id=s.id, nome=s.nome) for s in group.statuses],
    )


@router.post("", response_model=StatusGroupResponse, status_code=status.HTTP_201_CREATED)
def create_status_group(
    body: StatusGroupCreate,
    response: Response,
    db: Session = Depends(get_db),
) -> StatusGroupResponse:
    """Create a status group."""
    error = validate_name(body.nome)
    if error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)
    group = repo_create_status_group(db, nome=body.nome)
    LOG.info("Created status_grupo %s", group.id)
    response.headers["Location"] = f"{BASE_PATH}/{group.id}"
    return StatusGroupResponse(id=group.id, nome=group.nome)


@router.put("/{group_id}", response_model=StatusGroupResponse)
def update_status_group(
    group_id: EntityId,
    body: StatusGroupUpdate,
    db: Session = Depends(get_db),
) -> StatusGroupResponse:
    """Rename a status group."""
    if get_status_group(db, group_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    error = validate_name(body.nome)
    if error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)
    group = repo_update_status_group(db, group_id, nome=body.nome)
    LOG.info("Updated status_grupo %s", group_id)
    return StatusGroupResponse(id=group.id, nome=group.nome)


@router.delete("/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_status_group(group_id: EntityId, db: Session = Depends(get_db)) -> None:
    """Delete a status group. Refused while it still contains statuses."""
    if get_status_group(db, group_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    error = check_status_group_deletable(db, group_id)
    if error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)
    repo_delete_status_group(db, group_id)
    LOG.info("Deleted status_grupo %s", group_id)
