# app/api/auth/auth_controller.py

from typing import Optional

from fastapi import APIRouter, Depends, Header, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.api.auth.schema_auth import ClienteLoginRequest, LoginRequest, TokenResponse
from app.api.auth.service_auth import AuthService
from app.api.cadastros.models.model_admin import AdminModel
from app.api.cadastros.models.user_model import UserModel
from app.api.cadastros.schemas.schema_admin import AdminOut
from app.api.cadastros.schemas.schema_cliente import ClienteOut, ClienteSignup
from app.api.cadastros.schemas.schema_usuario import OAuthSessionRequest, UserResponse
from app.api.cadastros.services.service_cliente import ClienteService
from app.core.admin_dependencies import get_current_admin, get_current_user
from app.core.exceptions import ConflictError
from app.core.security import TIPO_ADMIN
from app.database.db_connection import get_db
from app.utils.logger import logger


router = APIRouter(tags=["auth"], prefix="/api/auth")


@router.post("/client/signup", response_model=ClienteOut, status_code=status.HTTP_201_CREATED)
def cadastrar_cliente(
    payload: ClienteSignup,
    db: Session = Depends(get_db),
):
    """Cadastro direto: cria o usuário (email + senha) e o perfil de cliente na mesma transação."""
    logger.info("[Auth] Cadastro direto de cliente")
    return ClienteService(db).signup(payload)


@router.post("/client/login", response_model=TokenResponse)
def login_cliente(
    payload: ClienteLoginRequest,
    db: Session = Depends(get_db),
):
    service = AuthService(db)
    user = service.login_cliente(payload.email, payload.senha)
    logger.info(f"[Auth] Login cliente - usuario={user.id}")
    return TokenResponse(role=user.role, access_token=service.token_usuario(user))


@router.post("/oauth/session", response_model=TokenResponse)
def sessao_oauth(
    payload: OAuthSessionRequest,
    x_oauth_secret: Optional[str] = Header(default=None),
    db: Session = Depends(get_db),
):
    """Chamado pelo callback OAuth externo com a identidade já resolvida."""
    service = AuthService(db)
    try:
        user = service.sessao_oauth(x_oauth_secret, payload)
    except IntegrityError as err:
        db.rollback()
        raise ConflictError("Email já cadastrado") from err
    logger.info(f"[Auth] Sessão OAuth - usuario={user.id}")
    return TokenResponse(role=user.role, access_token=service.token_usuario(user))


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Retorna o usuário atual baseado no token JWT"
)
def obter_usuario_atual(
    current_user: UserModel = Depends(get_current_user),
):
    """Puxa o usuário já autenticado pelo get_current_user e devolve seus campos."""
    return current_user


@router.post("/admin/login", response_model=TokenResponse)
def login_admin(
    payload: LoginRequest,
    db: Session = Depends(get_db),
):
    service = AuthService(db)
    admin = service.login_admin(payload.username, payload.password)
    logger.info(f"[Auth] Login admin - admin={admin.id}")
    return TokenResponse(tipo=TIPO_ADMIN, role="admin", access_token=service.token_admin(admin))


@router.get("/admin/me", response_model=AdminOut)
def obter_admin_atual(
    admin: AdminModel = Depends(get_current_admin),
):
    return admin
