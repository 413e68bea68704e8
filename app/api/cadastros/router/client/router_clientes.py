from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.cadastros.models.model_cliente import ClienteModel
from app.api.cadastros.models.user_model import UserModel
from app.api.cadastros.schemas.schema_cliente import ClienteCreate, ClienteOut, ClienteUpdate
from app.api.cadastros.services.service_cliente import ClienteService
from app.core.admin_dependencies import get_current_user
from app.core.client_dependecies import get_cliente_atual
from app.database.db_connection import get_db
from app.utils.logger import logger
from app.utils.minio_client import FotoStorage, get_foto_storage

router = APIRouter(prefix="/api/cadastros/client/clientes", tags=["Client - Cadastros - Clientes"])


@router.post("", response_model=ClienteOut, status_code=status.HTTP_201_CREATED)
def criar_perfil(
    payload: ClienteCreate,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
    storage: FotoStorage = Depends(get_foto_storage),
):
    logger.info(f"[Clientes] Criar perfil - usuario={user.id} foto={'sim' if payload.foto_base64 else 'não'}")
    return ClienteService(db, storage).create(user, payload)


@router.get("/me", response_model=ClienteOut)
def meu_perfil(cliente: ClienteModel = Depends(get_cliente_atual)):
    logger.info(f"[Clientes] Meu perfil - cliente={cliente.id}")
    return cliente


@router.put("/me", response_model=ClienteOut)
def atualizar_perfil(
    payload: ClienteUpdate,
    cliente: ClienteModel = Depends(get_cliente_atual),
    db: Session = Depends(get_db),
    storage: FotoStorage = Depends(get_foto_storage),
):
    logger.info(f"[Clientes] Update - cliente={cliente.id}")
    return ClienteService(db, storage).update(cliente, payload)
