"""User repository: list, get, create, update, delete."""
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from models.user import User
from repositories.id_allocator import insert_with_next_id
from utils.security import hash_password


def list_users(session: Session, offset: int, limit: int) -> list[User]:
    """Return one page of users ordered by id."""
    result = session.execute(select(User).order_by(User.id).offset(offset).limit(limit))
    return list(result.scalars().all())


def count_users(session: Session) -> int:
    """Return the number of users."""
    return session.execute(select(func.count()).select_from(User)).scalar() or 0


def get_user(session: Session, user_id: int) -> Optional[User]:
    """Return a user by id or None."""
    return session.get(User, user_id)


def username_taken(session: Session, usuario: str, exclude_id: Optional[int] = None) -> bool:
    """True if another user (not exclude_id) already has this username."""
    stmt = select(User.id).where(User.usuario == usuario)
    if exclude_id is not None:
        stmt = stmt.where(User.id != exclude_id)
    return session.execute(stmt.limit(1)).first() is not None


def create_user(session: Session, usuario: str, senha: str) -> User:
    """Create a user with a hashed password, commit, and return it."""
    senha_hash = hash_password(senha)
    return insert_with_next_id(
        session, User, lambda new_id: User(id=new_id, usuario=usuario, senha_hash=senha_hash)
    )


def update_user(session: Session, user_id: int, *, usuario: str, senha: str) -> Optional[User]:
    """Replace username and password. Returns updated user or None if not found."""
    user = get_user(session, user_id)
    if user is None:
        return None
    user.usuario = usuario
    user.senha_hash = hash_password(senha)
    session.commit()
    session.refresh(user)
    return user


def delete_user(session: Session, user_id: int) -> bool:
    """Delete a user by id. Returns True if deleted, False if not found."""
    user = get_user(session, user_id)
    if user is None:
        return False
    session.delete(user)
    session.commit()
    return True
