import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from financas_api.core.settings import Settings, get_settings
from financas_api.core.security import api_key_gate
from financas_api.core.logging import setup_logging
from financas_api.db import create_db_engine, create_session_factory

from financas_api.api.error_handlers import register_error_handlers
from financas_api.api.status import router as status_router
from financas_api.api.transaction import router as transaction_router
from financas_api.api.reports import router as reports_router

VERSION = "0.1.0"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("%s iniciada (env=%s, api_key=%s)", app.title, app.state.settings.ENV,
                "on" if app.state.settings.API_KEY_ENABLED else "off")
    yield
    # SIGINT/SIGTERM chegam aqui via uvicorn
    app.state.engine.dispose()
    logger.info("Conexão com o banco de dados encerrada.")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title=settings.APP_NAME, version=VERSION, lifespan=lifespan)

    app.state.settings = settings
    app.state.engine = create_db_engine(settings.DATABASE_URL)
    app.state.session_factory = create_session_factory(app.state.engine)

    # Gate antes do CORS: o CORS fica por fora e responde preflight sem chave
    if settings.API_KEY_ENABLED:
        app.middleware("http")(api_key_gate(settings.API_KEY))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(status_router)
    app.include_router(transaction_router)
    app.include_router(reports_router)

    return app


def run() -> None:
    import uvicorn

    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)
    app = create_app(settings)
    logger.info("Servidor rodando na porta %s", settings.API_PORT)
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT, log_config=None)


if __name__ == "__main__":
    run()
