from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, CheckConstraint, func
from app.database.db_connection import Base


class ProdutoModel(Base):
    __tablename__ = "produtos"
    __table_args__ = (
        CheckConstraint("preco >= 0", name="ck_produtos_preco_nao_negativo"),
        CheckConstraint("estoque >= 0", name="ck_produtos_estoque_nao_negativo"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(String(255), nullable=False)
    descricao = Column(Text, nullable=True)
    preco = Column(Integer, nullable=False)  # centavos
    categoria = Column(String(100), nullable=False, index=True)
    imagem_url = Column(Text, nullable=True)
    estoque = Column(Integer, nullable=False, default=0)

    # exclusão lógica: produto removido fica com ativo=False
    ativo = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
