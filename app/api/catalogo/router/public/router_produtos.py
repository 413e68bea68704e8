# app/api/catalogo/router/public/router_produtos.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.catalogo.schemas.schema_produtos import ProdutoResponse
from app.api.catalogo.services.service_produto import ProdutoService
from app.database.db_connection import get_db
from app.utils.logger import logger

router = APIRouter(prefix="/api/catalogo/public/produtos", tags=["Public - Catalogo - Produtos"])


@router.get(
    "",
    response_model=List[ProdutoResponse],
    summary="Lista produtos ativos",
    description="Suporta busca por nome/descrição via 'search' e filtro exato por 'categoria'.",
)
def listar_produtos(
    search: Optional[str] = Query(None, description="Termo de busca (nome ou descrição)"),
    categoria: Optional[str] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    db: Session = Depends(get_db),
):
    logger.info(f"[Produtos] Listar público - search={search} categoria={categoria}")
    return ProdutoService(db).listar(search=search, categoria=categoria, skip=skip, limit=limit)


@router.get("/categorias", response_model=List[str])
def listar_categorias(db: Session = Depends(get_db)):
    return ProdutoService(db).listar_categorias()


@router.get("/{produto_id}", response_model=ProdutoResponse)
def detalhe_produto(produto_id: int, db: Session = Depends(get_db)):
    logger.info(f"[Produtos] Detalhe público - id={produto_id}")
    return ProdutoService(db).get(produto_id)
