import math
from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from financas_api.models.transaction import TIPOS_TRANSACAO

MSG_CAMPOS_OBRIGATORIOS = "Descrição, valor e tipo são campos obrigatórios."
MSG_VALOR_INVALIDO = "Valor deve ser um número positivo."
MSG_TIPO_INVALIDO = 'Tipo deve ser "entrada" ou "saida".'


class TransacaoIn(BaseModel):
    """
    Corpo de POST /transacoes e PUT /transacoes/{id}.

    Sem coerção: "10" não é número, true não é número, "Entrada" não é tipo.
    A ordem das checagens define a mensagem: obrigatórios -> valor -> tipo.
    """

    descricao: str
    valor: float
    tipo: Literal["entrada", "saida"]

    @model_validator(mode="before")
    @classmethod
    def _campos_obrigatorios(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            raise ValueError(MSG_CAMPOS_OBRIGATORIOS)
        if not all(data.get(campo) for campo in ("descricao", "valor", "tipo")):
            raise ValueError(MSG_CAMPOS_OBRIGATORIOS)
        if not isinstance(data["descricao"], str):
            raise ValueError(MSG_CAMPOS_OBRIGATORIOS)
        return data

    @field_validator("valor", mode="before")
    @classmethod
    def _valor_positivo(cls, v: Any) -> Any:
        # bool é subclasse de int
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError(MSG_VALOR_INVALIDO)
        try:
            v = float(v)
        except OverflowError:
            # inteiro JSON grande demais para float
            raise ValueError(MSG_VALOR_INVALIDO)
        if not math.isfinite(v) or v <= 0:
            raise ValueError(MSG_VALOR_INVALIDO)
        return v

    @field_validator("tipo", mode="before")
    @classmethod
    def _tipo_valido(cls, v: Any) -> Any:
        if not isinstance(v, str) or v not in TIPOS_TRANSACAO:
            raise ValueError(MSG_TIPO_INVALIDO)
        return v


class TransacaoOut(BaseModel):
    id: int
    descricao: str
    valor: float
    tipo: str
    data_transacao: datetime

    model_config = ConfigDict(from_attributes=True)
