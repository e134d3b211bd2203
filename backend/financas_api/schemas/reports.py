from pydantic import BaseModel


class SaldoResponse(BaseModel):
    saldo_atual: float


# saldo_atual segue no corpo: clientes antigos liam esse campo nos totais
class TotalSaidaResponse(BaseModel):
    total_saida: float
    saldo_atual: float


class TotalEntradaResponse(BaseModel):
    total_entrada: float
    saldo_atual: float
