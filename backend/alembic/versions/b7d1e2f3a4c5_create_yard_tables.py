"""create_yard_tables

Revision ID: b7d1e2f3a4c5
Revises:
Create Date: 2026-10-19 10:12:41.108233

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'b7d1e2f3a4c5'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Ids are assigned by the application (max + 1), not by the database.
    op.create_table(
        "usuario",
        sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("usuario", sa.String(length=50), nullable=False),
        sa.Column("senha_hash", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("id", name="usuario_pk"),
        sa.UniqueConstraint("usuario", name="usuario_usuario_uk"),
    )
    op.create_table(
        "zona",
        sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("nome", sa.String(length=50), nullable=False),
        sa.Column("letra", sa.String(length=1), nullable=False),
        sa.PrimaryKeyConstraint("id", name="zona_pk"),
    )
    op.create_table(
        "patio",
        sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("nome", sa.String(length=200), nullable=False),
        sa.PrimaryKeyConstraint("id", name="patio_pk"),
    )
    op.create_table(
        "status_grupo",
        sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("nome", sa.String(length=200), nullable=False),
        sa.PrimaryKeyConstraint("id", name="status_grupo_pk"),
    )
    op.create_table(
        "status",
        sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("nome", sa.String(length=200), nullable=False),
        sa.Column("status_grupo_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["status_grupo_id"], ["status_grupo.id"], name="status_fk"),
        sa.PrimaryKeyConstraint("id", name="status_pk"),
    )
    op.create_table(
        "moto",
        sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("placa", sa.String(length=10), nullable=False),
        sa.Column("chassi", sa.String(length=20), nullable=False),
        sa.Column("qr_code", sa.String(length=255), nullable=True),
        sa.Column("data_entrada", sa.DateTime(), nullable=False),
        sa.Column("previsao_entrega", sa.DateTime(), nullable=True),
        sa.Column("fotos", sa.String(length=255), nullable=True),
        sa.Column("zona_id", sa.Integer(), nullable=False),
        sa.Column("patio_id", sa.Integer(), nullable=False),
        sa.Column("status_id", sa.Integer(), nullable=False),
        sa.Column("observacoes", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["zona_id"], ["zona.id"], name="moto_zona_fk"),
        sa.ForeignKeyConstraint(["patio_id"], ["patio.id"], name="moto_patio_fk"),
        sa.ForeignKeyConstraint(["status_id"], ["status.id"], name="moto_status_fk"),
        sa.PrimaryKeyConstraint("id", name="moto_pk"),
        sa.UniqueConstraint("placa", name="moto_placa_uk"),
        sa.UniqueConstraint("chassi", name="moto_chassi_uk"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("moto", if_exists=True)
    op.drop_table("status", if_exists=True)
    op.drop_table("status_grupo", if_exists=True)
    op.drop_table("patio", if_exists=True)
    op.drop_table("zona", if_exists=True)
    op.drop_table("usuario", if_exists=True)
