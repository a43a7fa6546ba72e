"""User model for DB persistence."""
from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from models import Base


class User(Base):
    """usuario table: id, usuario (unique login name), senha_hash."""

    __tablename__ = "usuario"
    __table_args__ = (UniqueConstraint("usuario", name="usuario_usuario_uk"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    usuario: Mapped[str] = mapped_column(String(50), nullable=False)
    # Password hash only; never returned in API.
    senha_hash: Mapped[str] = mapped_column(String(255), nullable=False)
