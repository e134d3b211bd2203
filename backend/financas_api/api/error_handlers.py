import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from financas_api.schemas.transaction import MSG_CAMPOS_OBRIGATORIOS

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Validação -> 400 com mensagem legível; qualquer outra exceção -> 500 genérico."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        erros = [_erro_legivel(e) for e in exc.errors()]
        logger.warning("Requisição inválida em %s %s: %s", request.method, request.url.path, erros)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": erros[0]["mensagem"], "errors": erros},
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error("Erro não tratado em %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Erro interno do servidor."},
        )


def _erro_legivel(e: dict) -> dict:
    # json_invalid também traz ctx.error (texto do decoder) e loc com offset em bytes
    if e.get("type") == "json_invalid":
        return {"campo": "body", "mensagem": "JSON inválido."}

    loc = [str(p) for p in e.get("loc", ()) if p != "body"]
    campo = ".".join(loc) or "body"

    # ValueError levantado pelos nossos validators: a mensagem já é a final
    ctx_err = (e.get("ctx") or {}).get("error")
    if ctx_err is not None:
        return {"campo": campo, "mensagem": str(ctx_err)}

    # corpo ausente
    if e.get("type") == "missing" and campo == "body":
        return {"campo": campo, "mensagem": MSG_CAMPOS_OBRIGATORIOS}

    return {"campo": campo, "mensagem": e.get("msg", "Requisição inválida.")}
