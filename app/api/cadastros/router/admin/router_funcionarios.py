from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.cadastros.schemas.schema_funcionario import FuncionarioCreate, FuncionarioOut
from app.api.cadastros.services.service_funcionario import FuncionarioService
from app.core.authorization import Ator, get_ator, require_admin
from app.database.db_connection import get_db
from app.utils.logger import logger

router = APIRouter(prefix="/api/cadastros/admin/funcionarios", tags=["Admin - Cadastros - Funcionários"])


@router.post("", response_model=FuncionarioOut, status_code=status.HTTP_201_CREATED)
def criar_funcionario(
    payload: FuncionarioCreate,
    ator: Ator = Depends(get_ator),
    db: Session = Depends(get_db),
):
    # o papel é conferido no service, antes de qualquer escrita
    logger.info(f"[Funcionarios] Criar - usuario_alvo={payload.usuario_id} por {ator.tipo}={ator.id}")
    return FuncionarioService(db).create(ator, payload)


@router.get("", response_model=List[FuncionarioOut])
def listar_funcionarios(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    ator: Ator = Depends(require_admin),
    db: Session = Depends(get_db),
):
    logger.info(f"[Funcionarios] Listar - skip={skip} limit={limit}")
    return FuncionarioService(db).list(skip=skip, limit=limit)
