from typing import Optional, List
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from app.api.cadastros.models.model_funcionario import FuncionarioModel


class FuncionarioRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_cpf(self, cpf: str) -> Optional[FuncionarioModel]:
        return self.db.query(FuncionarioModel).filter_by(cpf=cpf).first()

    def get_by_usuario_id(self, usuario_id: int) -> Optional[FuncionarioModel]:
        return self.db.query(FuncionarioModel).filter_by(usuario_id=usuario_id).first()

    def list(self, skip: int = 0, limit: int = 100) -> List[FuncionarioModel]:
        return (
            self.db.query(FuncionarioModel)
            .order_by(FuncionarioModel.id.asc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def create(self, **data) -> FuncionarioModel:
        obj = FuncionarioModel(**data)
        self.db.add(obj)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(obj)
        return obj
