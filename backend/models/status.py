"""Status model for DB persistence."""
from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models import Base


class Status(Base):
    """status table: id, nome, status_grupo_id."""

    __tablename__ = "status"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    nome: Mapped[str] = mapped_column(String(200), nullable=False)
    status_grupo_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("status_grupo.id", name="status_fk"),
        nullable=False,
    )

    status_grupo: Mapped["StatusGroup"] = relationship("StatusGroup")
