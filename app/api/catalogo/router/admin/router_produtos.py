# app/api/catalogo/router/admin/router_produtos.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.catalogo.schemas.schema_produtos import AtualizarProdutoRequest, CriarProdutoRequest, ProdutoResponse
from app.api.catalogo.services.service_produto import ProdutoService
from app.core.admin_dependencies import get_current_admin
from app.database.db_connection import get_db
from app.utils.logger import logger

router = APIRouter(
    prefix="/api/catalogo/admin/produtos",
    tags=["Admin - Catalogo - Produtos"],
    dependencies=[Depends(get_current_admin)],
)


@router.get("", response_model=List[ProdutoResponse], summary="Lista produtos (inclui inativos)")
def listar_produtos(
    search: Optional[str] = Query(None),
    categoria: Optional[str] = Query(None),
    apenas_ativos: bool = Query(False),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
):
    logger.info(f"[Produtos] Listar admin - search={search} categoria={categoria} ativos={apenas_ativos}")
    return ProdutoService(db).listar(
        apenas_ativos=apenas_ativos,
        search=search,
        categoria=categoria,
        skip=skip,
        limit=limit,
    )


@router.post("", response_model=ProdutoResponse, status_code=status.HTTP_201_CREATED)
def criar_produto(payload: CriarProdutoRequest, db: Session = Depends(get_db)):
    logger.info(f"[Produtos] Criar - nome={payload.nome}")
    return ProdutoService(db).create(payload)


@router.put("/{produto_id}", response_model=ProdutoResponse)
def atualizar_produto(produto_id: int, payload: AtualizarProdutoRequest, db: Session = Depends(get_db)):
    logger.info(f"[Produtos] Update - id={produto_id}")
    return ProdutoService(db).update(produto_id, payload)


@router.delete("/{produto_id}", status_code=status.HTTP_204_NO_CONTENT)
def remover_produto(produto_id: int, db: Session = Depends(get_db)):
    logger.info(f"[Produtos] Delete - id={produto_id}")
    ProdutoService(db).delete(produto_id)
