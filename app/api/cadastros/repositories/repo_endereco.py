from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.api.cadastros.models.model_cliente import ClienteModel
from app.api.cadastros.models.model_endereco import EnderecoModel


class EnderecoRepository:
    """
    Endereços de um cliente.

    Toda escrita que marca um endereço como padrão roda numa única transação:
    trava a linha do cliente (SELECT ... FOR UPDATE), desmarca os irmãos e só
    então grava o novo padrão. Duas requisições concorrentes do mesmo cliente
    ficam serializadas no lock, e o índice único parcial
    `uq_enderecos_cliente_padrao` barra qualquer escrita que escape disso.
    """

    def __init__(self, db: Session):
        self.db = db

    # Listar todos endereços de um cliente (padrão primeiro)
    def list_by_cliente(self, cliente_id: int) -> List[EnderecoModel]:
        return (
            self.db.query(EnderecoModel)
            .filter(EnderecoModel.cliente_id == cliente_id)
            .order_by(EnderecoModel.is_default.desc(), EnderecoModel.created_at.desc(), EnderecoModel.id.desc())
            .all()
        )

    # Buscar endereço específico (None se não existir ou for de outro cliente)
    def get_by_cliente(self, cliente_id: int, end_id: int) -> Optional[EnderecoModel]:
        return (
            self.db.query(EnderecoModel)
            .filter(
                EnderecoModel.id == end_id,
                EnderecoModel.cliente_id == cliente_id
            )
            .first()
        )

    def _travar_cliente(self, cliente_id: int) -> None:
        (
            self.db.query(ClienteModel.id)
            .filter(ClienteModel.id == cliente_id)
            .with_for_update()
            .first()
        )

    def _desmarcar_padrao(self, cliente_id: int, exclude_id: Optional[int] = None) -> None:
        q = self.db.query(EnderecoModel).filter(
            EnderecoModel.cliente_id == cliente_id,
            EnderecoModel.is_default.is_(True),
        )
        if exclude_id is not None:
            q = q.filter(EnderecoModel.id != exclude_id)
        q.update({EnderecoModel.is_default: False}, synchronize_session=False)

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise

    # Criar endereço
    def create(self, cliente_id: int, **dados) -> EnderecoModel:
        self._travar_cliente(cliente_id)
        if dados.get("is_default"):
            self._desmarcar_padrao(cliente_id)
        obj = EnderecoModel(cliente_id=cliente_id, **dados)
        self.db.add(obj)
        self._commit()
        self.db.refresh(obj)
        return obj

    # Atualizar endereço
    def update(self, obj: EnderecoModel, **dados) -> EnderecoModel:
        self._travar_cliente(obj.cliente_id)
        if dados.get("is_default"):
            self._desmarcar_padrao(obj.cliente_id, exclude_id=obj.id)
        for k, v in dados.items():
            setattr(obj, k, v)
        self._commit()
        self.db.refresh(obj)
        return obj

    # Marcar endereço como padrão
    def set_padrao(self, obj: EnderecoModel) -> EnderecoModel:
        return self.update(obj, is_default=True)

    # Deletar endereço
    def delete(self, obj: EnderecoModel) -> None:
        self.db.delete(obj)
        self.db.commit()

    # Verificar se endereço já existe
    def endereco_existe(self, cliente_id: int, dados: dict, exclude_id: Optional[int] = None) -> bool:
        """
        Compara logradouro, número, bairro, cidade, UF e CEP.
        Se exclude_id for fornecido, exclui esse ID da verificação (útil para updates).
        """
        query = (
            self.db.query(EnderecoModel.id)
            .filter(
                EnderecoModel.cliente_id == cliente_id,
                EnderecoModel.logradouro == dados.get("logradouro"),
                EnderecoModel.numero == dados.get("numero"),
                EnderecoModel.bairro == dados.get("bairro"),
                EnderecoModel.cidade == dados.get("cidade"),
                EnderecoModel.estado == dados.get("estado"),
                EnderecoModel.cep == dados.get("cep"),
            )
        )
        if exclude_id is not None:
            query = query.filter(EnderecoModel.id != exclude_id)
        return query.first() is not None
