"""
Gateway da tabela transacoes.

Cada método emite um único statement parametrizado; não há transação que
atravesse mais de um statement. Erros do driver sobem como SQLAlchemyError
para a rota decidir o 500.
"""
from fastapi import Depends
from sqlalchemy import case, delete, func, insert, select, update
from sqlalchemy.orm import Session

from financas_api.db import get_db
from financas_api.models.transaction import Transacao


def _soma(tipo: str):
    return func.coalesce(func.sum(case((Transacao.tipo == tipo, Transacao.valor), else_=0)), 0)


class TransacaoRepository:
    def __init__(self, db: Session):
        self.db = db

    def listar(self) -> list[Transacao]:
        q = select(Transacao).order_by(Transacao.data_transacao.desc(), Transacao.id.desc())
        return list(self.db.scalars(q))

    def obter(self, transacao_id: int) -> Transacao | None:
        return self.db.scalar(select(Transacao).where(Transacao.id == transacao_id))

    def criar(self, descricao: str, valor: float, tipo: str) -> Transacao:
        stmt = (
            insert(Transacao)
            .values(descricao=descricao, valor=valor, tipo=tipo)
            .returning(Transacao)
        )
        t = self.db.scalars(stmt).one()
        self.db.commit()
        return t

    def atualizar(self, transacao_id: int, descricao: str, valor: float, tipo: str) -> Transacao | None:
        stmt = (
            update(Transacao)
            .where(Transacao.id == transacao_id)
            .values(descricao=descricao, valor=valor, tipo=tipo)
            .returning(Transacao)
        )
        t = self.db.scalars(stmt).one_or_none()
        self.db.commit()
        return t

    def remover(self, transacao_id: int) -> bool:
        stmt = (
            delete(Transacao)
            .where(Transacao.id == transacao_id)
            .returning(Transacao.id)
        )
        removido = self.db.execute(stmt).scalar_one_or_none()
        self.db.commit()
        return removido is not None

    def saldo(self) -> float:
        q = select((_soma("entrada") - _soma("saida")).label("saldo_atual"))
        return float(self.db.execute(q).scalar_one() or 0)

    def total_entrada(self) -> float:
        return float(self.db.execute(select(_soma("entrada").label("total_entrada"))).scalar_one() or 0)

    def total_saida(self) -> float:
        return float(self.db.execute(select(_soma("saida").label("total_saida"))).scalar_one() or 0)


def get_repository(db: Session = Depends(get_db)) -> TransacaoRepository:
    return TransacaoRepository(db)
