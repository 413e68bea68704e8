# app/api/auth/auth_repo.py
from typing import Optional

from sqlalchemy.orm import Session

from app.api.cadastros.models.model_admin import AdminModel
from app.api.cadastros.models.user_model import UserModel


class AuthRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_user_by_id(self, user_id: int) -> Optional[UserModel]:
        return (
            self.db.query(UserModel)
            .filter(UserModel.id == user_id)
            .first()
        )

    def get_admin_by_username(self, username: str) -> Optional[AdminModel]:
        return (
            self.db.query(AdminModel)
            .filter(AdminModel.username == username)
            .first()
        )

    def get_admin_by_id(self, admin_id: int) -> Optional[AdminModel]:
        return (
            self.db.query(AdminModel)
            .filter(AdminModel.id == admin_id)
            .first()
        )

    def create_admin(self, admin: AdminModel) -> AdminModel:
        self.db.add(admin)
        self.db.commit()
        self.db.refresh(admin)
        return admin
