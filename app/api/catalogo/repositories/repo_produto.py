from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.api.catalogo.models.model_produto import ProdutoModel


class ProdutoRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, produto_id: int) -> Optional[ProdutoModel]:
        return self.db.query(ProdutoModel).filter(ProdutoModel.id == produto_id).first()

    def list(
        self,
        apenas_ativos: bool = True,
        search: Optional[str] = None,
        categoria: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[ProdutoModel]:
        q = self.db.query(ProdutoModel)
        if apenas_ativos:
            q = q.filter(ProdutoModel.ativo.is_(True))
        if categoria:
            q = q.filter(ProdutoModel.categoria == categoria)
        if search is not None:
            s = search.strip()
            if s:
                like = f"%{s}%"
                q = q.filter(or_(ProdutoModel.nome.ilike(like), ProdutoModel.descricao.ilike(like)))
        return q.order_by(ProdutoModel.nome.asc(), ProdutoModel.id.asc()).offset(skip).limit(limit).all()

    def list_categorias(self) -> List[str]:
        rows = (
            self.db.query(ProdutoModel.categoria)
            .filter(ProdutoModel.ativo.is_(True))
            .distinct()
            .order_by(ProdutoModel.categoria.asc())
            .all()
        )
        return [r[0] for r in rows]

    def create(self, **data) -> ProdutoModel:
        obj = ProdutoModel(**data)
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def update(self, db_obj: ProdutoModel, **data) -> ProdutoModel:
        for k, v in data.items():
            setattr(db_obj, k, v)
        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj

    def desativar(self, db_obj: ProdutoModel) -> ProdutoModel:
        db_obj.ativo = False
        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj
