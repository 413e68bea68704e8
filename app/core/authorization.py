from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.api.auth.auth_repo import AuthRepository
from app.core.admin_dependencies import credentials_exception, extrair_sessao
from app.core.exceptions import AuthorizationError
from app.core.security import TIPO_ADMIN
from app.database.db_connection import get_db
from app.utils.logger import logger


@dataclass(frozen=True)
class Ator:
    """
    Quem está executando a operação.

    - tipo="admin": credencial do painel (tabela admins), sempre com papel admin
    - tipo="usuario": usuário do app; papel vem da coluna `role`
    """
    tipo: str
    id: int
    role: str
    nome: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


def get_ator(
    request: Request,
    db: Session = Depends(get_db),
) -> Ator:
    """Aceita tanto sessão de usuário quanto de admin do painel."""
    tipo, sujeito_id = extrair_sessao(request)
    repo = AuthRepository(db)

    if tipo == TIPO_ADMIN:
        admin = repo.get_admin_by_id(sujeito_id)
        if not admin:
            raise credentials_exception()
        if not admin.ativo:
            raise AuthorizationError()
        return Ator(tipo=tipo, id=admin.id, role="admin", nome=admin.nome)

    user = repo.get_user_by_id(sujeito_id)
    if not user:
        raise credentials_exception()
    return Ator(tipo=tipo, id=user.id, role=user.role, nome=user.nome)


def require_admin(ator: Ator = Depends(get_ator)) -> Ator:
    """
    Atalho para rotas que só podem ser acessadas por atores com papel admin.
    """
    if not ator.is_admin:
        logger.warning(
            "[AUTH] Acesso negado. tipo=%s id=%s role=%s tentou acessar rota admin.",
            ator.tipo,
            ator.id,
            ator.role,
        )
        raise AuthorizationError()
    return ator
