"""
Schemas de Produtos
Centralizado no schema de catalogo
"""
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, constr, field_validator


def _strip(v):
    return v.strip() if isinstance(v, str) else v


# ------ Requests de criação/edição ------
class CriarProdutoRequest(BaseModel):
    nome: constr(min_length=1, max_length=255)
    descricao: Optional[str] = None
    preco: int = Field(..., ge=0, description="Preço em centavos")
    categoria: constr(min_length=1, max_length=100)
    imagem_url: Optional[str] = None
    estoque: int = Field(0, ge=0)

    @field_validator("nome", "categoria", mode="before")
    @classmethod
    def _strip_campos(cls, v):
        return _strip(v)


class AtualizarProdutoRequest(BaseModel):
    nome: Optional[constr(min_length=1, max_length=255)] = None
    descricao: Optional[str] = None
    preco: Optional[int] = Field(None, ge=0)
    categoria: Optional[constr(min_length=1, max_length=100)] = None
    imagem_url: Optional[str] = None
    estoque: Optional[int] = Field(None, ge=0)
    ativo: Optional[bool] = None

    @field_validator("nome", "categoria", mode="before")
    @classmethod
    def _strip_campos(cls, v):
        return _strip(v)


# ------ Responses ------
class ProdutoResponse(BaseModel):
    id: int
    nome: str
    descricao: Optional[str] = None
    preco: int
    categoria: str
    imagem_url: Optional[str] = None
    estoque: int
    ativo: bool

    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)
