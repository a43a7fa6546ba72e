"""Moto model for DB persistence."""
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models import Base


class Moto(Base):
    """moto table: plate and chassis are globally unique; zone, yard and status are required FKs."""

    __tablename__ = "moto"
    __table_args__ = (
        UniqueConstraint("placa", name="moto_placa_uk"),
        UniqueConstraint("chassi", name="moto_chassi_uk"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    placa: Mapped[str] = mapped_column(String(10), nullable=False)
    chassi: Mapped[str] = mapped_column(String(20), nullable=False)
    qr_code: Mapped[str | None] = mapped_column(String(255), nullable=True)
    data_entrada: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    previsao_entrega: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    fotos: Mapped[str | None] = mapped_column(String(255), nullable=True)
    zona_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("zona.id", name="moto_zona_fk"), nullable=False
    )
    patio_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("patio.id", name="moto_patio_fk"), nullable=False
    )
    status_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("status.id", name="moto_status_fk"), nullable=False
    )
    observacoes: Mapped[str | None] = mapped_column(Text, nullable=True)

    zona: Mapped["Zone"] = relationship("Zone")
    patio: Mapped["Yard"] = relationship("Yard")
    status: Mapped["Status"] = relationship("Status")
