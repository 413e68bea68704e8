from fastapi import Depends
from sqlalchemy.orm import Session

from app.api.cadastros.models.model_cliente import ClienteModel
from app.api.cadastros.models.user_model import UserModel
from app.api.cadastros.repositories.repo_cliente import ClienteRepository
from app.core.admin_dependencies import get_current_user
from app.core.exceptions import NotFoundError
from app.database.db_connection import get_db


def get_cliente_atual(
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> ClienteModel:
    cliente = ClienteRepository(db).get_by_usuario_id(user.id)
    if not cliente:
        raise NotFoundError("Perfil de cliente não encontrado. Crie um perfil primeiro.")
    return cliente
