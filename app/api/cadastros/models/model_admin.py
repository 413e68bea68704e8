from sqlalchemy import Column, Integer, String, Boolean, DateTime
from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed


class AdminModel(Base):
    """Credencial do painel administrativo, independente da tabela de usuários."""
    __tablename__ = "admins"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), unique=True, nullable=False)
    senha_hash = Column(String(255), nullable=False)
    email = Column(String(320), nullable=False)
    nome = Column(String(255), nullable=False)
    ativo = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)
