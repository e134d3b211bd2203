"""create transacoes

Revision ID: 0001
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "0001"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "transacoes",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("descricao", sa.Text(), nullable=False),
        sa.Column("valor", sa.Numeric(), nullable=False),
        sa.Column("tipo", sa.String(7), nullable=False),
        sa.Column("data_transacao", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("valor > 0", name="ck_transacoes_valor_positivo"),
        sa.CheckConstraint("tipo IN ('entrada', 'saida')", name="ck_transacoes_tipo"),
    )
    op.create_index("ix_transacoes_data_transacao", "transacoes", ["data_transacao"])


def downgrade() -> None:
    op.drop_index("ix_transacoes_data_transacao", table_name="transacoes")
    op.drop_table("transacoes")
