"""Yard (patio) model for DB persistence."""
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from models import Base


class Yard(Base):
    """patio table: id, nome."""

    __tablename__ = "patio"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    nome: Mapped[str] = mapped_column(String(200), nullable=False)
