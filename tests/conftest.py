import os
import tempfile

# Configuração de ambiente antes de importar a aplicação
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "chave-de-teste"
os.environ["OAUTH_BRIDGE_SECRET"] = "segredo-oauth-teste"
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="aaron-bike-logs-"))
os.environ.setdefault("MINIO_PUBLIC_ENDPOINT", "http://minio.teste")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError

from app.main import app
from app.api.cadastros.models.model_admin import AdminModel
from app.api.cadastros.models.user_model import UserModel
from app.core.security import TIPO_ADMIN, TIPO_USUARIO, create_access_token, hash_password
from app.database.db_connection import Base, SessionLocal, engine
from app.utils.minio_client import get_foto_storage


class FakeFotoStorage:
    def __init__(self, falhar: bool = False):
        self.falhar = falhar
        self.enviadas = []
        self.removidas = []

    def upload_foto_cliente(self, conteudo: bytes, nome: str) -> str:
        from app.core.exceptions import StorageError

        if self.falhar:
            raise StorageError()
        url = f"http://minio.teste/aaron-bike/clientes/foto-{len(self.enviadas) + 1}.jpg"
        self.enviadas.append((url, conteudo))
        return url

    def remover(self, file_url):
        self.removidas.append(file_url)
        return True


@pytest.fixture(autouse=True)
def banco():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def storage():
    fake = FakeFotoStorage()
    app.dependency_overrides[get_foto_storage] = lambda: fake
    yield fake
    app.dependency_overrides.pop(get_foto_storage, None)


@pytest.fixture
def client(storage):
    return TestClient(app)


@pytest.fixture
def db():
    session = SessionLocal()
    yield session
    session.close()


def criar_usuario(db, email="joao@example.com", role="user", nome="João Silva", senha=None):
    user = UserModel(
        open_id=f"teste:{email}",
        nome=nome,
        email=email,
        login_method="senha" if senha else "oauth",
        senha_hash=hash_password(senha) if senha else None,
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def criar_admin(db, username="admin", senha="admin123", ativo=True):
    admin = AdminModel(
        username=username,
        senha_hash=hash_password(senha),
        email=f"{username}@aaronbike.com.br",
        nome="Administrador",
        ativo=ativo,
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin


def auth_usuario(user) -> dict:
    token = create_access_token(data={"sub": user.id, "tipo": TIPO_USUARIO})
    return {"Authorization": f"Bearer {token}"}


def auth_admin(admin) -> dict:
    token = create_access_token(data={"sub": admin.id, "tipo": TIPO_ADMIN})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def usuario(db):
    return criar_usuario(db)


@pytest.fixture
def admin(db):
    return criar_admin(db)


def erro_de_unicidade(tabela_coluna: str) -> IntegrityError:
    """IntegrityError como o SQLite devolve ao violar UNIQUE em `tabela.coluna`."""
    return IntegrityError("INSERT", {}, Exception(f"UNIQUE constraint failed: {tabela_coluna}"))
