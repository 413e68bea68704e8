from typing import Optional

from sqlalchemy.orm import Session

from app.api.catalogo.repositories.repo_produto import ProdutoRepository
from app.api.catalogo.schemas.schema_produtos import CriarProdutoRequest, AtualizarProdutoRequest
from app.core.exceptions import NotFoundError, ValidationError
from app.utils.logger import logger

# colunas NOT NULL que não aceitam null explícito no update
_CAMPOS_OBRIGATORIOS = {"nome", "preco", "categoria", "estoque", "ativo"}


class ProdutoService:
    def __init__(self, db: Session):
        self.repo = ProdutoRepository(db)

    def listar(
        self,
        apenas_ativos: bool = True,
        search: Optional[str] = None,
        categoria: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ):
        return self.repo.list(
            apenas_ativos=apenas_ativos,
            search=search,
            categoria=categoria,
            skip=skip,
            limit=limit,
        )

    def listar_categorias(self):
        return self.repo.list_categorias()

    def get(self, produto_id: int, apenas_ativo: bool = True):
        obj = self.repo.get_by_id(produto_id)
        if not obj or (apenas_ativo and not obj.ativo):
            raise NotFoundError("Produto não encontrado")
        return obj

    def create(self, data: CriarProdutoRequest):
        obj = self.repo.create(**data.model_dump())
        logger.info(f"[Produtos] Criado id={obj.id} categoria={obj.categoria}")
        return obj

    def update(self, produto_id: int, data: AtualizarProdutoRequest):
        obj = self.get(produto_id, apenas_ativo=False)
        campos = data.model_dump(exclude_unset=True)
        for campo in _CAMPOS_OBRIGATORIOS:
            if campo in campos and campos[campo] is None:
                raise ValidationError(campo, f"Campo '{campo}' não pode ser nulo")
        return self.repo.update(obj, **campos)

    def delete(self, produto_id: int):
        """Exclusão lógica: o produto continua no banco com ativo=False."""
        obj = self.get(produto_id, apenas_ativo=False)
        self.repo.desativar(obj)
        logger.info(f"[Produtos] Desativado id={produto_id}")
