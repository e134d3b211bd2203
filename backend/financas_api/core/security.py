from __future__ import annotations

import logging
import secrets

from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-API-Key"

# únicas rotas fora do gate
STATUS_PATHS = frozenset({"/", "/health"})


def api_key_gate(api_key: str):
    """
    Access gate por chave compartilhada, montado como middleware HTTP.

    Roda antes do roteamento e da leitura do corpo, então cobre também
    /docs, /redoc e /openapi.json, e um corpo malformado sem chave é 401.
    - sem header (ou vazio): 401
    - header com chave diferente: 403
    """
    esperado = api_key.encode("utf-8")

    async def gate(request: Request, call_next):
        if request.url.path in STATUS_PATHS:
            return await call_next(request)

        recebido = request.headers.get(API_KEY_HEADER)
        if not recebido:
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"detail": "Chave de API ausente."},
            )

        if not secrets.compare_digest(recebido.encode("utf-8"), esperado):
            logger.warning("API key inválida em %s %s", request.method, request.url.path)
            return JSONResponse(
                status_code=status.HTTP_403_FORBIDDEN,
                content={"detail": "Chave de API inválida."},
            )

        return await call_next(request)

    return gate
