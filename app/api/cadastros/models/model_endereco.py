from sqlalchemy import Column, Integer, String, Text, ForeignKey, DateTime, Boolean, Index, text
from sqlalchemy.orm import relationship
from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed


class EnderecoModel(Base):
    __tablename__ = "enderecos"
    __table_args__ = (
        # no máximo um endereço padrão por cliente
        Index(
            "uq_enderecos_cliente_padrao",
            "cliente_id",
            unique=True,
            postgresql_where=text("is_default"),
            sqlite_where=text("is_default = 1"),
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    cliente_id = Column(Integer, ForeignKey("clientes.id", ondelete="CASCADE"), nullable=False, index=True)

    cep         = Column(String(8),   nullable=False)  # somente dígitos
    logradouro  = Column(String(255), nullable=False)
    numero      = Column(String(20),  nullable=False)
    bairro      = Column(String(100), nullable=False)
    cidade      = Column(String(100), nullable=False)
    estado      = Column(String(2),   nullable=False)
    complemento = Column(Text,        nullable=True)
    is_default  = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)

    cliente = relationship("ClienteModel", back_populates="enderecos")
