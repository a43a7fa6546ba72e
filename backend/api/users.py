"""User API routes. Passwords are hashed on write and never returned."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from api.params import EntityId, PageNumber, PageSize
from db import get_db
from repositories.user_repository import (
    count_users,
    create_user as repo_create_user,
    delete_user as repo_delete_user,
    get_user,
    list_users as repo_list_users,
    update_user as repo_update_user,
)
from schemas.common import PagedResponse
from schemas.users import UserCreate, UserResponse, UserUpdate
from utils.pagination import normalize_pagination, page_offset, to_paged
from utils.validators import validate_user

LOG = logging.getLogger(__name__)

BASE_PATH = "/api/usuarios"
NOT_FOUND = "Usuário não encontrado"

router = APIRouter(prefix="/usuarios", tags=["usuarios"])


@router.get("", response_model=PagedResponse[UserResponse])
def list_users(
    request: Request,
    page: PageNumber = 1,
    page_size: PageSize = 20,
    db: Session = Depends(get_db),
) -> PagedResponse:
    """List users (paginated)."""
    page, page_size = normalize_pagination(page, page_size)
    total = count_users(db)
    users = repo_list_users(db, page_offset(page, page_size), page_size)
    items = [UserResponse(id=u.id, usuario=u.usuario) for u in users]
    return to_paged(request, items, page, page_size, total, BASE_PATH)


@router.get("/{user_id}", response_model=UserResponse)
def get_user_by_id(user_id: EntityId, db: Session = Depends(get_db)) -> UserResponse:
    """Get a user by id."""
    user = get_user(db, user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return UserResponse(id=user.id, usuario=user.usuario)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(body: UserCreate, response: Response, db: Session = Depends(get_db)) -> UserResponse:
    """Create a user."""
    error = validate_user(db, usuario=body.usuario)
    if error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)
    user = repo_create_user(db, usuario=body.usuario, senha=body.senha)
    LOG.info("Created usuario %s (%s)", user.id, user.usuario)
    response.headers["Location"] = f"{BASE_PATH}/{user.id}"
    return UserResponse(id=user.id, usuario=user.usuario)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(user_id: EntityId, body: UserUpdate, db: Session = Depends(get_db)) -> UserResponse:
    """Replace a user's name and password."""
    if get_user(db, user_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    error = validate_user(db, usuario=body.usuario, exclude_id=user_id)
    if error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)
    user = repo_update_user(db, user_id, usuario=body.usuario, senha=body.senha)
    LOG.info("Updated usuario %s", user_id)
    return UserResponse(id=user.id, usuario=user.usuario)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: EntityId, db: Session = Depends(get_db)) -> None:
    """Delete a user."""
    if not repo_delete_user(db, user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    LOG.info("Deleted usuario %s", user_id)
