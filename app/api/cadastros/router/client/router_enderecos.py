from typing import List

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from app.api.cadastros.models.model_cliente import ClienteModel
from app.api.cadastros.schemas.schema_endereco import EnderecoCreate, EnderecoOut, EnderecoUpdate
from app.api.cadastros.services.service_endereco import EnderecosService
from app.core.client_dependecies import get_cliente_atual
from app.database.db_connection import get_db
from app.utils.logger import logger


router = APIRouter(
    prefix="/api/cadastros/client/enderecos",
    tags=["Client - Cadastros - Endereços"],
)

# Clientes só enxergam os próprios endereços: o service sempre filtra por
# cliente_id, e endereço de outro cliente responde 404.


@router.get("", response_model=List[EnderecoOut])
def listar_enderecos(
    cliente: ClienteModel = Depends(get_cliente_atual),
    db: Session = Depends(get_db)
):
    logger.info(f"[Enderecos] Listar - cliente={cliente.id}")
    return EnderecosService(db).list(cliente)


@router.get("/{endereco_id}", response_model=EnderecoOut)
def get_endereco(
    endereco_id: int = Path(...),
    cliente: ClienteModel = Depends(get_cliente_atual),
    db: Session = Depends(get_db)
):
    logger.info(f"[Enderecos] Get - id={endereco_id} cliente={cliente.id}")
    return EnderecosService(db).get(cliente, endereco_id)


@router.post("", response_model=EnderecoOut, status_code=status.HTTP_201_CREATED)
def criar_endereco(
    payload: EnderecoCreate,
    cliente: ClienteModel = Depends(get_cliente_atual),
    db: Session = Depends(get_db)
):
    logger.info(f"[Enderecos] Criar - cliente={cliente.id} padrao={payload.is_default}")
    return EnderecosService(db).create(cliente, payload)


@router.put("/{endereco_id}", response_model=EnderecoOut)
def atualizar_endereco(
    endereco_id: int,
    payload: EnderecoUpdate,
    cliente: ClienteModel = Depends(get_cliente_atual),
    db: Session = Depends(get_db)
):
    logger.info(f"[Enderecos] Update - id={endereco_id} cliente={cliente.id}")
    return EnderecosService(db).update(cliente, endereco_id, payload)


@router.put("/{endereco_id}/padrao", response_model=EnderecoOut)
def definir_padrao(
    endereco_id: int,
    cliente: ClienteModel = Depends(get_cliente_atual),
    db: Session = Depends(get_db)
):
    logger.info(f"[Enderecos] Definir padrão - id={endereco_id} cliente={cliente.id}")
    return EnderecosService(db).set_padrao(cliente, endereco_id)


@router.delete("/{endereco_id}", status_code=status.HTTP_204_NO_CONTENT)
def deletar_endereco(
    endereco_id: int,
    cliente: ClienteModel = Depends(get_cliente_atual),
    db: Session = Depends(get_db)
):
    logger.info(f"[Enderecos] Delete - id={endereco_id} cliente={cliente.id}")
    EnderecosService(db).delete(cliente, endereco_id)
