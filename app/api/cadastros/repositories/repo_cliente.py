from typing import Optional
from sqlalchemy.orm import Session, joinedload
from sqlalchemy.exc import IntegrityError

from app.api.cadastros.models.model_cliente import ClienteModel
from app.api.cadastros.models.user_model import UserModel


class ClienteRepository:
    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(ClienteModel).options(joinedload(ClienteModel.usuario))

    def get_by_usuario_id(self, usuario_id: int) -> Optional[ClienteModel]:
        return self._query().filter(ClienteModel.usuario_id == usuario_id).first()

    def get_by_cpf(self, cpf: str) -> Optional[ClienteModel]:
        return self.db.query(ClienteModel).filter_by(cpf=cpf).first()

    def create(self, **data) -> ClienteModel:
        obj = ClienteModel(**data)
        self.db.add(obj)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(obj)
        return obj

    def create_com_usuario(self, usuario: UserModel, **data) -> ClienteModel:
        """Grava usuário e cliente no mesmo commit (cadastro direto)."""
        obj = ClienteModel(usuario=usuario, **data)
        self.db.add(usuario)
        self.db.add(obj)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(obj)
        return obj

    def update(self, db_obj: ClienteModel, **data) -> ClienteModel:
        for k, v in data.items():
            setattr(db_obj, k, v)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(db_obj)
        return db_obj
