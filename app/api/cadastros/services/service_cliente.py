import base64
import binascii
import uuid
from typing import Optional

from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from app.api.cadastros.models.model_cliente import ClienteModel
from app.api.cadastros.models.user_model import UserModel
from app.api.cadastros.repositories.repo_cliente import ClienteRepository
from app.api.cadastros.repositories.repo_usuario import UsuarioRepository
from app.api.cadastros.schemas.schema_cliente import ClienteCreate, ClienteSignup, ClienteUpdate
from app.api.cadastros.services.validacao import exigir_cpf, exigir_email, exigir_telefone
from app.core.exceptions import ConflictError, ValidationError
from app.core.security import hash_password
from app.utils.database_utils import violou_unique
from app.utils.logger import logger
from app.utils.minio_client import FotoStorage


def decodificar_foto(foto_base64: str) -> bytes:
    """Aceita base64 puro ou data URL (data:image/jpeg;base64,...)."""
    conteudo = foto_base64.strip()
    if conteudo.startswith("data:") and "," in conteudo:
        conteudo = conteudo.split(",", 1)[1]
    try:
        dados = base64.b64decode(conteudo, validate=True)
    except (binascii.Error, ValueError):
        raise ValidationError("foto_base64", "Foto inválida (base64 malformado)")
    if not dados:
        raise ValidationError("foto_base64", "Foto vazia")
    return dados


class ClienteService:
    def __init__(self, db: Session, storage: Optional[FotoStorage] = None):
        self.repo = ClienteRepository(db)
        self.repo_usuario = UsuarioRepository(db)
        self.storage = storage

    def _traduzir_integridade(self, err: IntegrityError):
        if violou_unique(err, "clientes", "cpf"):
            raise ConflictError("CPF já cadastrado") from err
        if violou_unique(err, "clientes", "usuario_id"):
            raise ConflictError("Usuário já possui perfil de cliente") from err
        if violou_unique(err, "usuarios", "email"):
            raise ConflictError("Email já cadastrado") from err
        raise err

    def _upload_foto(self, foto_base64: str, nome: Optional[str]) -> str:
        conteudo = decodificar_foto(foto_base64)
        if self.storage is None:
            raise RuntimeError("Storage de fotos não configurado")
        return self.storage.upload_foto_cliente(conteudo, nome or "cliente")

    def create(self, user: UserModel, data: ClienteCreate) -> ClienteModel:
        # um perfil de cliente por usuário
        if self.repo.get_by_usuario_id(user.id):
            raise ConflictError("Usuário já possui perfil de cliente")

        cpf = exigir_cpf(data.cpf)
        telefone = exigir_telefone(data.telefone)

        if self.repo.get_by_cpf(cpf):
            logger.warning(f"[Cliente] CPF duplicado - usuario={user.id}")
            raise ConflictError("CPF já cadastrado")

        foto_url = None
        if data.foto_base64:
            foto_url = self._upload_foto(data.foto_base64, user.nome)

        try:
            return self.repo.create(usuario_id=user.id, cpf=cpf, telefone=telefone, foto_url=foto_url)
        except IntegrityError as err:
            # nada foi gravado: a foto enviada ficaria órfã no bucket
            if foto_url:
                self.storage.remover(foto_url)
            self._traduzir_integridade(err)

    def signup(self, data: ClienteSignup) -> ClienteModel:
        email = exigir_email(data.email.strip())
        telefone = exigir_telefone(data.telefone)
        cpf = exigir_cpf(data.cpf)

        if self.repo_usuario.get_by_email(email):
            raise ConflictError("Email já cadastrado")
        if self.repo.get_by_cpf(cpf):
            logger.warning("[Cliente] CPF duplicado no cadastro direto")
            raise ConflictError("CPF já cadastrado")

        usuario = UserModel(
            open_id=f"local:{uuid.uuid4().hex}",
            nome=data.nome.strip(),
            email=email,
            login_method="senha",
            senha_hash=hash_password(data.senha),
            role="user",
        )
        try:
            return self.repo.create_com_usuario(usuario, cpf=cpf, telefone=telefone)
        except IntegrityError as err:
            self._traduzir_integridade(err)

    def update(self, cliente: ClienteModel, data: ClienteUpdate) -> ClienteModel:
        campos = data.model_dump(exclude_unset=True)
        dados = {}
        foto_antiga = None

        if "telefone" in campos:
            if campos["telefone"] is None:
                raise ValidationError("telefone", "Telefone é obrigatório")
            dados["telefone"] = exigir_telefone(campos["telefone"])

        if "foto_base64" in campos:
            foto_antiga = cliente.foto_url
            if campos["foto_base64"] is None:
                dados["foto_url"] = None
            else:
                dados["foto_url"] = self._upload_foto(campos["foto_base64"], cliente.nome)

        if not dados:
            return cliente

        atualizado = self.repo.update(cliente, **dados)
        if foto_antiga and self.storage is not None:
            self.storage.remover(foto_antiga)
        return atualizado
