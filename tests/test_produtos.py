import pytest

from app.api.catalogo.models.model_produto import ProdutoModel

from conftest import auth_admin, auth_usuario

ADMIN_URL = "/api/catalogo/admin/produtos"
PUBLIC_URL = "/api/catalogo/public/produtos"


@pytest.fixture
def headers(admin):
    return auth_admin(admin)


def criar(client, headers, **extra):
    dados = {"nome": "Câmara de ar aro 29", "preco": 3990, "categoria": "Pneus", "estoque": 10}
    dados.update(extra)
    resp = client.post(ADMIN_URL, json=dados, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_criar_produto(client, headers):
    produto = criar(client, headers, descricao="Válvula presta")
    assert produto["preco"] == 3990
    assert produto["ativo"] is True


def test_preco_negativo_rejeitado(client, headers):
    resp = client.post(ADMIN_URL, json={"nome": "X", "preco": -1, "categoria": "Pneus"}, headers=headers)
    assert resp.status_code == 422


def test_catalogo_admin_exige_sessao_de_admin(client, usuario):
    resp = client.post(ADMIN_URL, json={"nome": "X", "preco": 1, "categoria": "Y"}, headers=auth_usuario(usuario))
    assert resp.status_code == 401


def test_busca_e_filtro_publico(client, headers):
    criar(client, headers)
    criar(client, headers, nome="Capacete urbano", categoria="Acessórios", descricao="Tamanho M")
    criar(client, headers, nome="Luva de ciclismo", categoria="Acessórios")

    nomes = [p["nome"] for p in client.get(PUBLIC_URL, params={"search": "capacete"}).json()]
    assert nomes == ["Capacete urbano"]

    nomes = [p["nome"] for p in client.get(PUBLIC_URL, params={"search": "tamanho"}).json()]
    assert nomes == ["Capacete urbano"]

    nomes = [p["nome"] for p in client.get(PUBLIC_URL, params={"categoria": "Acessórios"}).json()]
    assert nomes == ["Capacete urbano", "Luva de ciclismo"]

    assert client.get(f"{PUBLIC_URL}/categorias").json() == ["Acessórios", "Pneus"]


def test_exclusao_logica(client, db, headers):
    produto = criar(client, headers)

    resp = client.delete(f"{ADMIN_URL}/{produto['id']}", headers=headers)
    assert resp.status_code == 204

    assert db.query(ProdutoModel).count() == 1
    assert client.get(PUBLIC_URL).json() == []
    assert client.get(f"{PUBLIC_URL}/{produto['id']}").status_code == 404
    assert client.get(f"{PUBLIC_URL}/categorias").json() == []

    todos = client.get(ADMIN_URL, headers=headers).json()
    assert [p["ativo"] for p in todos] == [False]


def test_atualizar_produto(client, headers):
    produto = criar(client, headers)
    resp = client.put(f"{ADMIN_URL}/{produto['id']}", json={"preco": 4590, "estoque": 3}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["preco"] == 4590
    assert resp.json()["estoque"] == 3

    resp = client.put(f"{ADMIN_URL}/{produto['id']}", json={"nome": None}, headers=headers)
    assert resp.status_code == 422


def test_produto_inexistente(client, headers):
    assert client.put(f"{ADMIN_URL}/999", json={"preco": 1}, headers=headers).status_code == 404


def test_atualizar_nome_ou_categoria_so_com_espacos(client, headers):
    produto = criar(client, headers)
    url = f"{ADMIN_URL}/{produto['id']}"

    assert client.put(url, json={"nome": "   "}, headers=headers).status_code == 422
    assert client.put(url, json={"categoria": "\t "}, headers=headers).status_code == 422

    resp = client.put(url, json={"nome": "  Câmara aro 29 ", "categoria": "  Pneus "}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["nome"] == "Câmara aro 29"
    assert resp.json()["categoria"] == "Pneus"
