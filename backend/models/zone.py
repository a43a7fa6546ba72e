"""Zone model for DB persistence."""
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from models import Base


class Zone(Base):
    """zona table: id, nome, letra (single-letter code)."""

    __tablename__ = "zona"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    nome: Mapped[str] = mapped_column(String(50), nullable=False)
    letra: Mapped[str] = mapped_column(String(1), nullable=False)
