# app/core/admin_dependencies.py

from fastapi import Depends, Request
from jose import JWTError
from sqlalchemy.orm import Session

from app.api.auth.auth_repo import AuthRepository
from app.api.cadastros.models.model_admin import AdminModel
from app.api.cadastros.models.user_model import UserModel
from app.core.exceptions import AuthenticationError, AuthorizationError
from app.core.security import TIPO_ADMIN, TIPO_USUARIO, decode_access_token
from app.database.db_connection import get_db
from app.utils.logger import logger


def credentials_exception() -> AuthenticationError:
    return AuthenticationError("Não autenticado")


def extrair_sessao(request: Request) -> tuple[str, int]:
    """
    Lê o header Authorization (Bearer <token>) e devolve (tipo, id) do token assinado.
    O token só identifica o sujeito; papéis e flags são sempre relidos do banco.
    """
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        logger.warning("[AUTH] Cabeçalho Authorization ausente ou malformado.")
        raise credentials_exception()

    access_token = auth_header.replace("Bearer ", "", 1)
    try:
        return decode_access_token(access_token)
    except (JWTError, ValueError) as e:
        logger.error(f"[AUTH] Erro ao decodificar JWT: {e}")
        raise credentials_exception()


def get_current_user(
    request: Request,
    db: Session = Depends(get_db),
) -> UserModel:
    """
    Recupera o usuário autenticado (sessão do tipo "usuario").
    """
    tipo, user_id = extrair_sessao(request)
    if tipo != TIPO_USUARIO:
        raise credentials_exception()

    user = AuthRepository(db).get_user_by_id(user_id)
    if not user:
        raise credentials_exception()

    return user


def get_current_admin(
    request: Request,
    db: Session = Depends(get_db),
) -> AdminModel:
    """
    Recupera o admin do painel (sessão do tipo "admin"); admins inativos perdem o acesso na hora.
    """
    tipo, admin_id = extrair_sessao(request)
    if tipo != TIPO_ADMIN:
        raise credentials_exception()

    admin = AuthRepository(db).get_admin_by_id(admin_id)
    if not admin:
        raise credentials_exception()
    if not admin.ativo:
        logger.warning("[AUTH] Admin inativo id=%s tentou acessar rota admin.", admin_id)
        raise AuthorizationError()

    return admin
