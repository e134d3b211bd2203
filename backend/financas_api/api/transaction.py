import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import SQLAlchemyError

from financas_api.repositories.transacoes import TransacaoRepository, get_repository
from financas_api.schemas.transaction import TransacaoIn, TransacaoOut

router = APIRouter(prefix="/transacoes", tags=["transacoes"])

logger = logging.getLogger(__name__)


@router.get("", response_model=list[TransacaoOut])
def list_transacoes(repo: TransacaoRepository = Depends(get_repository)):
    try:
        return repo.listar()
    except SQLAlchemyError:
        logger.exception("Erro ao buscar transações")
        raise HTTPException(status_code=500, detail="Erro interno do servidor ao buscar transações.")


@router.get("/{transacao_id}", response_model=TransacaoOut)
def get_transacao(transacao_id: int, repo: TransacaoRepository = Depends(get_repository)):
    try:
        t = repo.obter(transacao_id)
    except SQLAlchemyError:
        logger.exception("Erro ao buscar transação com ID %s", transacao_id)
        raise HTTPException(status_code=500, detail="Erro interno do servidor ao buscar transação.")

    if not t:
        raise HTTPException(status_code=404, detail="Transação não encontrada.")
    return t


@router.post("", response_model=TransacaoOut, status_code=201)
def create_transacao(payload: TransacaoIn, repo: TransacaoRepository = Depends(get_repository)):
    try:
        return repo.criar(payload.descricao, payload.valor, payload.tipo)
    except SQLAlchemyError:
        logger.exception("Erro ao adicionar transação")
        raise HTTPException(status_code=500, detail="Erro interno do servidor ao adicionar transação.")


@router.put("/{transacao_id}", response_model=TransacaoOut)
def update_transacao(
    transacao_id: int,
    payload: TransacaoIn,
    repo: TransacaoRepository = Depends(get_repository),
):
    try:
        t = repo.atualizar(transacao_id, payload.descricao, payload.valor, payload.tipo)
    except SQLAlchemyError:
        logger.exception("Erro ao atualizar transação com ID %s", transacao_id)
        raise HTTPException(status_code=500, detail="Erro interno do servidor ao atualizar transação.")

    if not t:
        raise HTTPException(status_code=404, detail="Transação não encontrada para atualização.")
    return t


@router.delete("/{transacao_id}", status_code=204, response_class=Response)
def delete_transacao(transacao_id: int, repo: TransacaoRepository = Depends(get_repository)):
    try:
        removida = repo.remover(transacao_id)
    except SQLAlchemyError:
        logger.exception("Erro ao excluir transação com ID %s", transacao_id)
        raise HTTPException(status_code=500, detail="Erro interno do servidor ao excluir transação.")

    if not removida:
        raise HTTPException(status_code=404, detail="Transação não encontrada para exclusão.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
