from typing import Optional
from sqlalchemy.orm import Session

from app.api.cadastros.models.user_model import UserModel
from app.utils.database_utils import now_trimmed


class UsuarioRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, id: int) -> Optional[UserModel]:
        return (
            self.db.query(UserModel)
            .filter(UserModel.id == id)
            .first()
        )

    def get_by_open_id(self, open_id: str) -> Optional[UserModel]:
        return self.db.query(UserModel).filter_by(open_id=open_id).first()

    def get_by_email(self, email: str) -> Optional[UserModel]:
        return self.db.query(UserModel).filter_by(email=email).first()

    def create(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def update(self, user: UserModel, data: dict) -> UserModel:
        for key, value in data.items():
            setattr(user, key, value)
        self.db.commit()
        self.db.refresh(user)
        return user

    def registrar_login(self, user: UserModel) -> UserModel:
        return self.update(user, {"last_signed_in": now_trimmed()})
