import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError

from financas_api.repositories.transacoes import TransacaoRepository, get_repository
from financas_api.schemas.reports import SaldoResponse, TotalEntradaResponse, TotalSaidaResponse

router = APIRouter(tags=["relatorios"])

logger = logging.getLogger(__name__)

MSG_ERRO_SALDO = "Erro interno do servidor ao calcular saldo."


@router.get("/saldo", response_model=SaldoResponse)
def saldo(repo: TransacaoRepository = Depends(get_repository)):
    """Soma das entradas menos soma das saídas (0 sem transações)."""
    try:
        return SaldoResponse(saldo_atual=repo.saldo())
    except SQLAlchemyError:
        logger.exception("Erro ao calcular saldo")
        raise HTTPException(status_code=500, detail=MSG_ERRO_SALDO)


@router.get("/totalSaida", response_model=TotalSaidaResponse)
def total_saida(repo: TransacaoRepository = Depends(get_repository)):
    try:
        total = repo.total_saida()
    except SQLAlchemyError:
        logger.exception("Erro ao calcular total de saídas")
        raise HTTPException(status_code=500, detail=MSG_ERRO_SALDO)
    return TotalSaidaResponse(total_saida=total, saldo_atual=total)


@router.get("/totalEntrada", response_model=TotalEntradaResponse)
def total_entrada(repo: TransacaoRepository = Depends(get_repository)):
    try:
        total = repo.total_entrada()
    except SQLAlchemyError:
        logger.exception("Erro ao calcular total de entradas")
        raise HTTPException(status_code=500, detail=MSG_ERRO_SALDO)
    return TotalEntradaResponse(total_entrada=total, saldo_atual=total)
