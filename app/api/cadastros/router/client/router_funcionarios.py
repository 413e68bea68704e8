from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.cadastros.models.user_model import UserModel
from app.api.cadastros.schemas.schema_funcionario import FuncionarioOut
from app.api.cadastros.services.service_funcionario import FuncionarioService
from app.core.admin_dependencies import get_current_user
from app.database.db_connection import get_db
from app.utils.logger import logger

router = APIRouter(prefix="/api/cadastros/client/funcionarios", tags=["Client - Cadastros - Funcionários"])


@router.get("/me", response_model=FuncionarioOut)
def meu_perfil_funcionario(
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    logger.info(f"[Funcionarios] Meu perfil - usuario={user.id}")
    return FuncionarioService(db).get_by_usuario_id(user.id)
