"""StatusGroup model for DB persistence."""
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models import Base


class StatusGroup(Base):
    """status_grupo table: id, nome. Statuses are loaded on demand."""

    __tablename__ = "status_grupo"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    nome: Mapped[str] = mapped_column(String(200), nullable=False)

    statuses: Mapped[list["Status"]] = relationship(
        "Status",
        order_by="Status.id",
        viewonly=True,
    )
