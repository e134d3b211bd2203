from sqlalchemy import String, Text, Numeric, DateTime, CheckConstraint, func
from sqlalchemy.orm import Mapped, mapped_column
from financas_api.db import Base
from datetime import datetime

TIPOS_TRANSACAO = ("entrada", "saida")


class Transacao(Base):
    __tablename__ = "transacoes"
    __table_args__ = (
        CheckConstraint("valor > 0", name="ck_transacoes_valor_positivo"),
        CheckConstraint("tipo IN ('entrada', 'saida')", name="ck_transacoes_tipo"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    descricao: Mapped[str] = mapped_column(Text, nullable=False)

    # sempre positivo; a direção vem de "tipo". Numeric sem escala: guarda o valor como veio
    valor: Mapped[float] = mapped_column(Numeric(asdecimal=False), nullable=False)

    # "entrada" ou "saida"
    tipo: Mapped[str] = mapped_column(String(7), nullable=False)

    # preenchido pelo banco
    data_transacao: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now(), index=True
    )
