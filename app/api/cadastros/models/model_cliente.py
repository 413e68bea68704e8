from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from app.database.db_connection import Base

from app.utils.database_utils import now_trimmed


class ClienteModel(Base):
    __tablename__ = "clientes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    usuario_id = Column(Integer, ForeignKey("usuarios.id", ondelete="CASCADE"), nullable=False, unique=True)
    cpf = Column(String(11), unique=True, nullable=False)  # somente dígitos
    telefone = Column(String(11), nullable=False)  # somente dígitos (DDD + número)
    foto_url = Column(Text, nullable=True)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)

    usuario = relationship("UserModel", back_populates="cliente")
    enderecos = relationship(
        "EnderecoModel",
        back_populates="cliente",
        cascade="all, delete-orphan"
    )

    @property
    def nome(self):
        return self.usuario.nome if self.usuario else None

    @property
    def email(self):
        return self.usuario.email if self.usuario else None
