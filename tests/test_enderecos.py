import pytest
from sqlalchemy.exc import IntegrityError

from app.api.cadastros.models.model_cliente import ClienteModel
from app.api.cadastros.models.model_endereco import EnderecoModel
from app.api.cadastros.repositories.repo_endereco import EnderecoRepository

from conftest import auth_usuario, criar_usuario, erro_de_unicidade

URL = "/api/cadastros/client/enderecos"


def novo_endereco(**extra):
    dados = {
        "cep": "01310-100",
        "logradouro": "Avenida Paulista",
        "numero": "1000",
        "bairro": "Bela Vista",
        "cidade": "São Paulo",
        "estado": "sp",
    }
    dados.update(extra)
    return dados


@pytest.fixture
def headers(client, usuario):
    h = auth_usuario(usuario)
    resp = client.post("/api/cadastros/client/clientes", json={"cpf": "11144477735", "telefone": "11987654321"}, headers=h)
    assert resp.status_code == 201, resp.text
    return h


def test_criar_e_listar_enderecos(client, headers):
    resp = client.post(URL, json=novo_endereco(), headers=headers)
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["cep"] == "01310-100"
    assert body["estado"] == "SP"
    assert body["is_default"] is False

    resp = client.get(URL, headers=headers)
    assert resp.status_code == 200
    assert len(resp.json()) == 1


def test_cep_invalido(client, db, headers):
    resp = client.post(URL, json=novo_endereco(cep="0131-010"), headers=headers)
    assert resp.status_code == 422
    assert resp.json()["field"] == "cep"
    assert db.query(EnderecoModel).count() == 0


def test_endereco_duplicado_retorna_409(client, headers):
    assert client.post(URL, json=novo_endereco(), headers=headers).status_code == 201
    resp = client.post(URL, json=novo_endereco(cep="01310100"), headers=headers)
    assert resp.status_code == 409


def test_segundo_padrao_deixa_apenas_um(client, db, headers):
    primeiro = client.post(URL, json=novo_endereco(is_default=True), headers=headers).json()
    segundo = client.post(URL, json=novo_endereco(numero="2000", is_default=True), headers=headers).json()

    assert db.query(EnderecoModel).filter(EnderecoModel.is_default.is_(True)).count() == 1

    lista = client.get(URL, headers=headers).json()
    padroes = [e["id"] for e in lista if e["is_default"]]
    assert padroes == [segundo["id"]]
    assert lista[0]["id"] == segundo["id"]

    resp = client.put(f"{URL}/{primeiro['id']}/padrao", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["is_default"] is True

    lista = client.get(URL, headers=headers).json()
    assert [e["id"] for e in lista if e["is_default"]] == [primeiro["id"]]


def test_update_marcando_padrao(client, headers):
    a = client.post(URL, json=novo_endereco(is_default=True), headers=headers).json()
    b = client.post(URL, json=novo_endereco(numero="2000"), headers=headers).json()

    resp = client.put(f"{URL}/{b['id']}", json={"is_default": True, "complemento": "Apto 12"}, headers=headers)
    assert resp.status_code == 200, resp.text
    assert resp.json()["complemento"] == "Apto 12"

    resp = client.get(f"{URL}/{a['id']}", headers=headers)
    assert resp.json()["is_default"] is False


def test_update_com_null_em_campo_obrigatorio(client, headers):
    end = client.post(URL, json=novo_endereco(), headers=headers).json()
    resp = client.put(f"{URL}/{end['id']}", json={"logradouro": None}, headers=headers)
    assert resp.status_code == 422
    assert resp.json()["field"] == "logradouro"


def test_endereco_de_outro_cliente_retorna_404(client, db, headers):
    end = client.post(URL, json=novo_endereco(), headers=headers).json()

    outro = criar_usuario(db, email="maria@example.com", nome="Maria")
    outro_headers = auth_usuario(outro)
    resp = client.post(
        "/api/cadastros/client/clientes",
        json={"cpf": "52998224725", "telefone": "21987654321"},
        headers=outro_headers,
    )
    assert resp.status_code == 201

    assert client.get(f"{URL}/{end['id']}", headers=outro_headers).status_code == 404
    assert client.put(f"{URL}/{end['id']}", json={"numero": "1"}, headers=outro_headers).status_code == 404
    assert client.put(f"{URL}/{end['id']}/padrao", headers=outro_headers).status_code == 404
    assert client.delete(f"{URL}/{end['id']}", headers=outro_headers).status_code == 404
    assert client.get(URL, headers=outro_headers).json() == []


def test_remover_endereco(client, db, headers):
    end = client.post(URL, json=novo_endereco(is_default=True), headers=headers).json()
    resp = client.delete(f"{URL}/{end['id']}", headers=headers)
    assert resp.status_code == 204
    assert db.query(EnderecoModel).count() == 0


def test_usuario_sem_perfil_de_cliente(client, usuario):
    resp = client.get(URL, headers=auth_usuario(usuario))
    assert resp.status_code == 404


def test_indice_parcial_impede_dois_padroes(db, usuario):
    cliente = ClienteModel(usuario_id=usuario.id, cpf="11144477735", telefone="11987654321")
    db.add(cliente)
    db.commit()

    campos = novo_endereco()
    db.add(EnderecoModel(cliente_id=cliente.id, is_default=True, **campos))
    db.add(EnderecoModel(cliente_id=cliente.id, is_default=False, **{**campos, "numero": "2"}))
    db.commit()

    db.add(EnderecoModel(cliente_id=cliente.id, is_default=True, **{**campos, "numero": "3"}))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()

    assert db.query(EnderecoModel).filter_by(cliente_id=cliente.id, is_default=True).count() == 1


@pytest.mark.parametrize("metodo, rota", [("create", "post"), ("set_padrao", "put")])
def test_padrao_gravado_ao_mesmo_tempo_retorna_409(client, headers, monkeypatch, metodo, rota):
    existente = client.post(URL, json=novo_endereco(), headers=headers).json()

    def gravar_concorrente(self, *args, **kwargs):
        raise erro_de_unicidade("enderecos.cliente_id")

    monkeypatch.setattr(EnderecoRepository, metodo, gravar_concorrente)
    if rota == "post":
        resp = client.post(URL, json=novo_endereco(numero="2000", is_default=True), headers=headers)
    else:
        resp = client.put(f"{URL}/{existente['id']}/padrao", headers=headers)

    assert resp.status_code == 409
    assert resp.json()["detail"] == "Outro endereço padrão foi gravado ao mesmo tempo, tente novamente"
