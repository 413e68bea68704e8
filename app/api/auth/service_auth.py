# app/api/auth/service_auth.py
import hmac
from typing import Optional

from sqlalchemy.orm import Session

from app.api.auth.auth_repo import AuthRepository
from app.api.cadastros.models.model_admin import AdminModel
from app.api.cadastros.models.user_model import UserModel
from app.api.cadastros.repositories.repo_usuario import UsuarioRepository
from app.api.cadastros.schemas.schema_usuario import OAuthSessionRequest
from app.api.cadastros.services.validacao import exigir_email
from app.config.settings import OAUTH_BRIDGE_SECRET
from app.core.exceptions import AuthenticationError, AuthorizationError
from app.core.security import TIPO_ADMIN, TIPO_USUARIO, create_access_token, verify_password
from app.utils.database_utils import now_trimmed
from app.utils.logger import logger


class AuthService:
    """
    Emissão de sessões. Falhas de credencial sempre devolvem a mesma mensagem
    genérica, sem indicar se o login ou a senha estava errado; o bcrypt roda
    mesmo quando o registro não existe.
    """

    def __init__(self, db: Session):
        self.repo = AuthRepository(db)
        self.repo_usuario = UsuarioRepository(db)

    @staticmethod
    def token_usuario(user: UserModel) -> str:
        return create_access_token(data={"sub": user.id, "tipo": TIPO_USUARIO})

    @staticmethod
    def token_admin(admin: AdminModel) -> str:
        return create_access_token(data={"sub": admin.id, "tipo": TIPO_ADMIN})

    def login_cliente(self, email: str, senha: str) -> UserModel:
        user = self.repo_usuario.get_by_email(email.strip().lower())
        if not verify_password(senha, user.senha_hash if user else None):
            logger.warning("[AUTH] Login de cliente recusado")
            raise AuthenticationError()
        return self.repo_usuario.registrar_login(user)

    def login_admin(self, username: str, senha: str) -> AdminModel:
        admin = self.repo.get_admin_by_username(username.strip())
        if not verify_password(senha, admin.senha_hash if admin else None):
            logger.warning("[AUTH] Login de admin recusado")
            raise AuthenticationError()
        if not admin.ativo:
            logger.warning("[AUTH] Admin inativo id=%s tentou login", admin.id)
            raise AuthorizationError("Administrador inativo")
        return admin

    def sessao_oauth(self, segredo: Optional[str], data: OAuthSessionRequest) -> UserModel:
        """
        Cria ou atualiza o usuário identificado pelo provedor OAuth.
        O login_method de um usuário existente (ex.: cadastro com senha) não muda.
        """
        if not OAUTH_BRIDGE_SECRET or not segredo or not hmac.compare_digest(segredo, OAUTH_BRIDGE_SECRET):
            logger.warning("[AUTH] Sessão OAuth com segredo inválido")
            raise AuthenticationError("Não autenticado")

        email = exigir_email(data.email.strip()) if data.email is not None else None
        user = self.repo_usuario.get_by_open_id(data.open_id)
        if user is None:
            user = self.repo_usuario.create(
                UserModel(
                    open_id=data.open_id,
                    nome=data.nome,
                    email=email,
                    login_method=data.login_method,
                    role="user",
                )
            )
            logger.info(f"[AUTH] Usuário OAuth criado id={user.id}")
            return user

        dados = {"last_signed_in": now_trimmed()}
        if data.nome is not None:
            dados["nome"] = data.nome
        if email is not None:
            dados["email"] = email
        return self.repo_usuario.update(user, dados)
