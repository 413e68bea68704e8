# app/api/cadastros/models/user_model.py
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed


class UserModel(Base):
    """
    Identidade canônica do sistema.

    Usuários OAuth chegam com `open_id` do provedor e sem senha; o cadastro
    direto (email + senha) gera um `open_id` local e guarda o hash bcrypt.
    """
    __tablename__ = "usuarios"

    id = Column(Integer, primary_key=True, autoincrement=True)
    open_id = Column(String(64), unique=True, nullable=False)
    nome = Column(String(255), nullable=True)
    email = Column(String(320), unique=True, nullable=True)
    login_method = Column(String(64), nullable=False, default="oauth")
    senha_hash = Column(String(255), nullable=True)
    role = Column(String(10), nullable=False, default="user")

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)
    last_signed_in = Column(DateTime, default=now_trimmed, nullable=False)

    cliente = relationship("ClienteModel", back_populates="usuario", uselist=False)
    funcionario = relationship("FuncionarioModel", back_populates="usuario", uselist=False)
