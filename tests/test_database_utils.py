from types import SimpleNamespace

from sqlalchemy.exc import IntegrityError

from app.utils.database_utils import violou_unique

from conftest import erro_de_unicidade


class ErroPostgres(Exception):
    def __init__(self, constraint_name):
        super().__init__("duplicate key value violates unique constraint")
        self.diag = SimpleNamespace(constraint_name=constraint_name)


def test_violou_unique_pela_mensagem_do_sqlite():
    erro = erro_de_unicidade("clientes.cpf")
    assert violou_unique(erro, "clientes", "cpf")
    assert not violou_unique(erro, "clientes", "usuario_id")
    assert not violou_unique(erro, "funcionarios", "cpf")


def test_violou_unique_pelo_nome_da_constraint():
    erro = IntegrityError("INSERT", {}, ErroPostgres("usuarios_email_key"))
    assert violou_unique(erro, "usuarios", "email")
    assert not violou_unique(erro, "clientes", "cpf")
