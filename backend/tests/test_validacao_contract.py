import pytest

from financas_api.schemas.transaction import (
    MSG_CAMPOS_OBRIGATORIOS,
    MSG_TIPO_INVALIDO,
    MSG_VALOR_INVALIDO,
)

VALIDO = {"descricao": "salario", "valor": 1000, "tipo": "entrada"}


def _com(**kw):
    body = dict(VALIDO)
    body.update(kw)
    return body


def _sem(campo):
    return {k: v for k, v in VALIDO.items() if k != campo}


CASOS = [
    (_sem("descricao"), MSG_CAMPOS_OBRIGATORIOS),
    (_sem("valor"), MSG_CAMPOS_OBRIGATORIOS),
    (_sem("tipo"), MSG_CAMPOS_OBRIGATORIOS),
    (_com(descricao=""), MSG_CAMPOS_OBRIGATORIOS),
    (_com(descricao=None), MSG_CAMPOS_OBRIGATORIOS),
    (_com(valor=0), MSG_CAMPOS_OBRIGATORIOS),
    (_com(valor=-10), MSG_VALOR_INVALIDO),
    (_com(valor=-0.01), MSG_VALOR_INVALIDO),
    (_com(valor="100"), MSG_VALOR_INVALIDO),
    (_com(valor=True), MSG_VALOR_INVALIDO),
    (_com(valor=[1]), MSG_VALOR_INVALIDO),
    (_com(tipo="Entrada"), MSG_TIPO_INVALIDO),
    (_com(tipo="transferencia"), MSG_TIPO_INVALIDO),
    (_com(tipo=1), MSG_TIPO_INVALIDO),
    ({}, MSG_CAMPOS_OBRIGATORIOS),
    ([VALIDO], MSG_CAMPOS_OBRIGATORIOS),
]


@pytest.mark.parametrize("body,mensagem", CASOS)
def test_create_rejects_invalid_body(client, body, mensagem):
    resp = client.post("/transacoes", json=body)
    assert resp.status_code == 400
    assert resp.json()["detail"] == mensagem

    # nada foi gravado
    assert client.get("/transacoes").json() == []


@pytest.mark.parametrize("body,mensagem", CASOS)
def test_update_rejects_invalid_body(client, criar_transacao, body, mensagem):
    t = criar_transacao()

    resp = client.put(f"/transacoes/{t['id']}", json=body)
    assert resp.status_code == 400
    assert resp.json()["detail"] == mensagem

    assert client.get(f"/transacoes/{t['id']}").json() == t


def test_invalid_body_on_missing_id_is_still_400(client):
    resp = client.put("/transacoes/999999", json=_com(valor=-1))
    assert resp.status_code == 400


def test_valor_checked_before_tipo(client):
    resp = client.post("/transacoes", json=_com(valor=-5, tipo="outro"))
    assert resp.status_code == 400

    data = resp.json()
    assert data["detail"] == MSG_VALOR_INVALIDO
    assert [e["campo"] for e in data["errors"]] == ["valor", "tipo"]


def test_missing_body_is_400(client):
    resp = client.post("/transacoes")
    assert resp.status_code == 400
    assert resp.json()["detail"] == MSG_CAMPOS_OBRIGATORIOS


def test_malformed_json_is_400(client):
    resp = client.post(
        "/transacoes",
        content=b'{"descricao": "x",',
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"detail": "JSON inválido.", "errors": [{"campo": "body", "mensagem": "JSON inválido."}]}


def test_float_valor_accepted(client):
    resp = client.post("/transacoes", json=_com(valor=0.01, tipo="saida"))
    assert resp.status_code == 201
    assert resp.json()["valor"] == 0.01


def test_valor_too_large_for_float_is_400(client):
    resp = client.post(
        "/transacoes",
        content=b'{"descricao": "x", "valor": 1' + b"0" * 400 + b', "tipo": "entrada"}',
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json()["detail"] == MSG_VALOR_INVALIDO


@pytest.mark.parametrize("valor", [0.001, 10.555, 12345678901.25])
def test_valor_is_stored_without_rounding(client, valor):
    resp = client.post("/transacoes", json=_com(valor=valor))
    assert resp.status_code == 201
    assert resp.json()["valor"] == valor

    t = client.get(f"/transacoes/{resp.json()['id']}").json()
    assert t["valor"] == valor


def test_valor_column_has_no_fixed_scale():
    from financas_api.models.transaction import Transacao

    tipo = Transacao.__table__.c.valor.type
    assert tipo.precision is None
    assert tipo.scale is None
