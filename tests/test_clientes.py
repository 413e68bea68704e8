import pytest
from sqlalchemy.exc import IntegrityError

from app.api.cadastros.models.model_cliente import ClienteModel
from app.api.cadastros.repositories.repo_cliente import ClienteRepository
from app.api.cadastros.services.service_cliente import ClienteService
from app.main import app
from app.utils.minio_client import get_foto_storage

from conftest import FakeFotoStorage, auth_usuario, criar_usuario, erro_de_unicidade

URL = "/api/cadastros/client/clientes"
FOTO = "aGVsbG8gbXVuZG8="


def test_criar_perfil_cliente(client, usuario):
    resp = client.post(URL, json={"cpf": "111.444.777-35", "telefone": "(11) 98765-4321"}, headers=auth_usuario(usuario))
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["usuario_id"] == usuario.id
    assert body["nome"] == "João Silva"
    assert body["cpf"] == "111.444.777-35"
    assert body["telefone"] == "(11) 98765-4321"
    assert body["foto_url"] is None


def test_cpf_duplicado_retorna_409_sem_segundo_registro(client, db, usuario):
    outro = criar_usuario(db, email="maria@example.com", nome="Maria")

    resp = client.post(URL, json={"cpf": "11144477735", "telefone": "11987654321"}, headers=auth_usuario(usuario))
    assert resp.status_code == 201, resp.text

    resp = client.post(URL, json={"cpf": "111.444.777-35", "telefone": "11912345678"}, headers=auth_usuario(outro))
    assert resp.status_code == 409
    assert resp.json()["detail"] == "CPF já cadastrado"
    assert db.query(ClienteModel).filter_by(cpf="11144477735").count() == 1


def test_cpf_invalido_retorna_422(client, db, usuario):
    resp = client.post(URL, json={"cpf": "12345678900", "telefone": "11987654321"}, headers=auth_usuario(usuario))
    assert resp.status_code == 422
    assert resp.json()["field"] == "cpf"
    assert db.query(ClienteModel).count() == 0


def test_telefone_invalido_retorna_422(client, usuario):
    resp = client.post(URL, json={"cpf": "11144477735", "telefone": "00912345678"}, headers=auth_usuario(usuario))
    assert resp.status_code == 422
    assert resp.json()["field"] == "telefone"


def test_usuario_so_tem_um_perfil(client, usuario):
    payload = {"cpf": "11144477735", "telefone": "11987654321"}
    assert client.post(URL, json=payload, headers=auth_usuario(usuario)).status_code == 201

    resp = client.post(URL, json={"cpf": "52998224725", "telefone": "11987654321"}, headers=auth_usuario(usuario))
    assert resp.status_code == 409


def test_sem_token_retorna_401(client):
    resp = client.post(URL, json={"cpf": "11144477735", "telefone": "11987654321"})
    assert resp.status_code == 401
    assert resp.headers["www-authenticate"] == "Bearer"


def test_meu_perfil_sem_cadastro_retorna_404(client, usuario):
    resp = client.get(f"{URL}/me", headers=auth_usuario(usuario))
    assert resp.status_code == 404


def test_criar_perfil_com_foto(client, storage, usuario):
    resp = client.post(
        URL,
        json={"cpf": "11144477735", "telefone": "11987654321", "foto_base64": f"data:image/jpeg;base64,{FOTO}"},
        headers=auth_usuario(usuario),
    )
    assert resp.status_code == 201, resp.text
    assert resp.json()["foto_url"] == storage.enviadas[0][0]
    assert storage.enviadas[0][1] == b"hello mundo"


def test_foto_base64_invalida(client, db, storage, usuario):
    resp = client.post(
        URL,
        json={"cpf": "11144477735", "telefone": "11987654321", "foto_base64": "@@@ isso não é base64"},
        headers=auth_usuario(usuario),
    )
    assert resp.status_code == 422
    assert resp.json()["field"] == "foto_base64"
    assert storage.enviadas == []
    assert db.query(ClienteModel).count() == 0


def test_falha_no_upload_nao_grava_cliente(client, db, usuario):
    app.dependency_overrides[get_foto_storage] = lambda: FakeFotoStorage(falhar=True)

    resp = client.post(
        URL,
        json={"cpf": "11144477735", "telefone": "11987654321", "foto_base64": FOTO},
        headers=auth_usuario(usuario),
    )
    assert resp.status_code == 502
    assert db.query(ClienteModel).count() == 0


def test_atualizar_telefone_e_trocar_foto(client, storage, usuario):
    headers = auth_usuario(usuario)
    resp = client.post(URL, json={"cpf": "11144477735", "telefone": "11987654321", "foto_base64": FOTO}, headers=headers)
    foto_antiga = resp.json()["foto_url"]

    resp = client.put(f"{URL}/me", json={"telefone": "(21) 3456-7890", "foto_base64": FOTO}, headers=headers)
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["telefone"] == "(21) 3456-7890"
    assert body["foto_url"] != foto_antiga
    assert storage.removidas == [foto_antiga]


def test_atualizar_com_telefone_invalido(client, usuario):
    headers = auth_usuario(usuario)
    client.post(URL, json={"cpf": "11144477735", "telefone": "11987654321"}, headers=headers)

    resp = client.put(f"{URL}/me", json={"telefone": "1187654"}, headers=headers)
    assert resp.status_code == 422

    resp = client.get(f"{URL}/me", headers=headers)
    assert resp.json()["telefone"] == "(11) 98765-4321"


def test_cpf_gravado_ao_mesmo_tempo_remove_foto_enviada(client, db, storage, usuario, monkeypatch):
    def criar_concorrente(self, **data):
        raise erro_de_unicidade("clientes.cpf")

    monkeypatch.setattr(ClienteRepository, "create", criar_concorrente)
    resp = client.post(
        URL,
        json={"cpf": "11144477735", "telefone": "11987654321", "foto_base64": FOTO},
        headers=auth_usuario(usuario),
    )
    assert resp.status_code == 409
    assert resp.json()["detail"] == "CPF já cadastrado"
    assert len(storage.enviadas) == 1
    assert storage.removidas == [storage.enviadas[0][0]]
    assert db.query(ClienteModel).count() == 0


def test_violacao_desconhecida_nao_vira_409(db):
    erro = erro_de_unicidade("outra_tabela.coluna")
    with pytest.raises(IntegrityError):
        ClienteService(db)._traduzir_integridade(erro)
