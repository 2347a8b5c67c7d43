"""
Tests da API HTTP de tarefas através do TestClient do FastAPI.
Cada test usa uma app nova, com o seu próprio store em memória.
"""

from unittest.mock import Mock

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from backend_fastapi.api.errors import (
    MENSAGEM_JSON_MALFORMADO,
    MENSAGEM_ROTA_NAO_ENCONTRADA,
)
from backend_fastapi.main import create_app
from core.domain.validacao import MENSAGEM_CORPO_NAO_OBJETO
from infrastructure.memoria.repository.tarefa_repository import (
    InMemoryTarefaRepository,
)

LEITE = {"titulo": "Buy milk", "descricao": "2%", "concluida": False}


@pytest.fixture
def repo():
    return InMemoryTarefaRepository()


@pytest.fixture
def client(repo):
    return TestClient(create_app(repository=repo))


def _criar(client, **campos):
    resp = client.post("/tarefas", json={**LEITE, **campos})
    assert resp.status_code == 201
    return resp.json()


# ──────────────────────────────────────────────────────────────────────────────
# Cenário completo
# ──────────────────────────────────────────────────────────────────────────────


def test_ciclo_de_vida_completo(client):
    resp = client.post("/tarefas", json=LEITE)
    assert resp.status_code == 201
    criada = resp.json()
    assert criada["id"]
    assert {k: criada[k] for k in LEITE} == LEITE

    resp = client.get(f"/tarefas/{criada['id']}")
    assert resp.status_code == 200
    assert resp.json() == criada

    resp = client.patch(f"/tarefas/{criada['id']}/concluir")
    assert resp.status_code == 200
    assert resp.json() == {**criada, "concluida": True}

    resp = client.delete(f"/tarefas/{criada['id']}")
    assert resp.status_code == 204
    assert resp.content == b""

    resp = client.get(f"/tarefas/{criada['id']}")
    assert resp.status_code == 404
    assert resp.json() == {"erro": "Tarefa não encontrada."}


# ──────────────────────────────────────────────────────────────────────────────
# POST /tarefas
# ──────────────────────────────────────────────────────────────────────────────


def test_criar_ignora_campos_extras(client):
    criada = _criar(client, prioridade="alta")

    assert set(criada) == {"id", "titulo", "descricao", "concluida"}


@pytest.mark.parametrize(
    "corpo, mensagem",
    [
        (
            {"titulo": "ab", "descricao": "x", "concluida": True},
            "O campo 'titulo' deve ter no mínimo 3 caracteres.",
        ),
        ({"titulo": "abc", "descricao": "x"}, "O campo 'concluida' é obrigatório."),
        ([1, 2], MENSAGEM_CORPO_NAO_OBJETO),
    ],
)
def test_criar_com_payload_invalido_devolve_400(client, repo, corpo, mensagem):
    resp = client.post("/tarefas", json=corpo)

    assert resp.status_code == 400
    assert resp.json() == {"erro": mensagem}
    assert len(repo) == 0


def test_criar_com_json_malformado_devolve_400(client):
    resp = client.post(
        "/tarefas",
        content=b"{titulo:",
        headers={"Content-Type": "application/json"},
    )

    assert resp.status_code == 400
    assert resp.json() == {"erro": MENSAGEM_JSON_MALFORMADO}


def test_criar_com_falha_inesperada_devolve_500_sem_expor_causa():
    repo = Mock()
    repo.save.side_effect = RuntimeError("disco cheio")
    client = TestClient(create_app(repository=repo))

    resp = client.post("/tarefas", json=LEITE)

    assert resp.status_code == 500
    assert resp.json() == {"erro": "Erro interno ao criar tarefa."}
    assert "disco" not in resp.text


# ──────────────────────────────────────────────────────────────────────────────
# GET /tarefas
# ──────────────────────────────────────────────────────────────────────────────


def test_listar_vazio(client):
    resp = client.get("/tarefas")

    assert resp.status_code == 200
    assert resp.json() == []


def test_listar_filtrando_por_concluida(client):
    pendente = _criar(client, titulo="Pendente")
    feita = _criar(client, titulo="Feita", concluida=True)

    todas = client.get("/tarefas").json()
    concluidas = client.get("/tarefas", params={"concluida": "true"}).json()
    pendentes = client.get("/tarefas", params={"concluida": "false"}).json()
    qualquer = client.get("/tarefas", params={"concluida": "talvez"}).json()

    assert todas == [pendente, feita]
    assert concluidas == [feita]
    assert pendentes == [pendente]
    assert qualquer == [pendente]


# ──────────────────────────────────────────────────────────────────────────────
# PUT /tarefas/{id}
# ──────────────────────────────────────────────────────────────────────────────


def test_atualizar_substitui_campos_e_mantem_id(client):
    criada = _criar(client)

    resp = client.put(
        f"/tarefas/{criada['id']}",
        json={"titulo": "Buy oat milk", "descricao": "1L", "concluida": True, "id": "x"},
    )

    assert resp.status_code == 200
    assert resp.json() == {
        "id": criada["id"],
        "titulo": "Buy oat milk",
        "descricao": "1L",
        "concluida": True,
    }
    assert client.get(f"/tarefas/{criada['id']}").json() == resp.json()


def test_atualizar_invalido_devolve_400_sem_alterar(client):
    criada = _criar(client)

    resp = client.put(f"/tarefas/{criada['id']}", json={"titulo": "ab"})

    assert resp.status_code == 400
    assert client.get(f"/tarefas/{criada['id']}").json() == criada


def test_atualizar_inexistente_devolve_404(client):
    resp = client.put("/tarefas/nao-existe", json=LEITE)

    assert resp.status_code == 404
    assert resp.json() == {"erro": "Tarefa não encontrada."}


# ──────────────────────────────────────────────────────────────────────────────
# PATCH /tarefas/{id}/concluir e DELETE /tarefas/{id}
# ──────────────────────────────────────────────────────────────────────────────


def test_concluir_duas_vezes_e_idempotente(client):
    criada = _criar(client)

    primeira = client.patch(f"/tarefas/{criada['id']}/concluir").json()
    segunda = client.patch(f"/tarefas/{criada['id']}/concluir").json()

    assert primeira == segunda
    assert segunda["concluida"] is True


def test_concluir_inexistente_devolve_404(client):
    resp = client.patch("/tarefas/nao-existe/concluir")

    assert resp.status_code == 404
    assert resp.json() == {"erro": "Tarefa não encontrada."}


def test_excluir_inexistente_devolve_404(client):
    resp = client.delete("/tarefas/nao-existe")

    assert resp.status_code == 404
    assert resp.json() == {"erro": "Tarefa não encontrada."}


# ──────────────────────────────────────────────────────────────────────────────
# Rotas desconhecidas
# ──────────────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "metodo, caminho",
    [
        ("get", "/usuarios"),
        ("get", "/tarefas/abc/outra"),
        ("post", "/tarefas/abc"),
        ("delete", "/tarefas"),
    ],
)
def test_rota_desconhecida_devolve_404(client, metodo, caminho):
    resp = client.request(metodo.upper(), caminho)

    assert resp.status_code == 404
    assert resp.json() == {"erro": "Rota não encontrada."}


def test_apps_nao_compartilham_tarefas(client):
    _criar(client)
    outra = TestClient(create_app())

    assert outra.get("/tarefas").json() == []


def test_corpo_nao_objeto_e_json_malformado_tem_mensagens_distintas(client):
    nao_objeto = client.post("/tarefas", json="texto")
    malformado = client.post(
        "/tarefas",
        content=b"[1,",
        headers={"Content-Type": "application/json"},
    )

    assert nao_objeto.json() == {"erro": MENSAGEM_CORPO_NAO_OBJETO}
    assert malformado.json() == {"erro": MENSAGEM_JSON_MALFORMADO}
    assert MENSAGEM_CORPO_NAO_OBJETO != MENSAGEM_JSON_MALFORMADO


def test_404_levantado_por_endpoint_nao_vira_rota_nao_encontrada(repo):
    app = create_app(repository=repo)

    @app.get("/recurso-ausente")
    def recurso_ausente():
        raise HTTPException(status_code=404, detail="Not Found")

    resp = TestClient(app).get("/recurso-ausente")

    assert resp.status_code == 404
    assert resp.json() == {"erro": "Not Found"}
    assert resp.json() != {"erro": MENSAGEM_ROTA_NAO_ENCONTRADA}
