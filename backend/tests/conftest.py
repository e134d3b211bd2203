import pytest
from fastapi.testclient import TestClient

from financas_api.core.settings import Settings
from financas_api.db import Base
from financas_api.main import create_app

API_KEY = "chave-de-teste"


def _make_app(**overrides):
    # sqlite em memória (StaticPool): cada app nasce com um banco vazio
    params = {"DATABASE_URL": "sqlite://", "ENV": "lab", "API_KEY_ENABLED": False, "API_KEY": ""}
    params.update(overrides)
    app = create_app(Settings(**params))
    Base.metadata.create_all(bind=app.state.engine)
    return app


@pytest.fixture
def app():
    return _make_app()


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def gated_app():
    return _make_app(API_KEY_ENABLED=True, API_KEY=API_KEY)


@pytest.fixture
def gated_client(gated_app):
    with TestClient(gated_app) as c:
        yield c


@pytest.fixture
def auth_header():
    return {"X-API-Key": API_KEY}


@pytest.fixture
def criar_transacao(client):
    def _criar(descricao="salario", valor=1000, tipo="entrada"):
        r = client.post("/transacoes", json={"descricao": descricao, "valor": valor, "tipo": tipo})
        assert r.status_code == 201, r.text
        return r.json()

    return _criar
