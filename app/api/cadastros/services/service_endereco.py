from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.api.cadastros.models.model_cliente import ClienteModel
from app.api.cadastros.repositories.repo_endereco import EnderecoRepository
from app.api.cadastros.schemas.schema_endereco import EnderecoCreate, EnderecoUpdate
from app.api.cadastros.services.validacao import exigir_cep
from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.utils.logger import logger

CAMPOS_CRITICOS = ("logradouro", "numero", "bairro", "cidade", "estado", "cep")

# colunas NOT NULL: null explícito no update é erro, não "limpar campo"
CAMPOS_OBRIGATORIOS = CAMPOS_CRITICOS + ("is_default",)


class EnderecosService:
    """
    Endereços do cliente autenticado. Toda operação recebe o ClienteModel já
    resolvido pela sessão; endereço de outro cliente responde como inexistente.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = EnderecoRepository(db)

    def list(self, cliente: ClienteModel):
        return self.repo.list_by_cliente(cliente.id)

    def get(self, cliente: ClienteModel, end_id: int):
        obj = self.repo.get_by_cliente(cliente.id, end_id)
        if not obj:
            raise NotFoundError("Endereço não encontrado")
        return obj

    def create(self, cliente: ClienteModel, payload: EnderecoCreate):
        dados = payload.model_dump()
        dados["cep"] = exigir_cep(dados["cep"])

        if self.repo.endereco_existe(cliente.id, dados):
            raise ConflictError("Este endereço já existe para este cliente")

        try:
            obj = self.repo.create(cliente.id, **dados)
        except IntegrityError as err:
            raise ConflictError("Outro endereço padrão foi gravado ao mesmo tempo, tente novamente") from err

        logger.info(f"[Enderecos] Criado id={obj.id} cliente={cliente.id} padrao={obj.is_default}")
        return obj

    def update(self, cliente: ClienteModel, end_id: int, payload: EnderecoUpdate):
        obj = self.get(cliente, end_id)
        dados = payload.model_dump(exclude_unset=True)

        for campo in CAMPOS_OBRIGATORIOS:
            if campo in dados and dados[campo] is None:
                raise ValidationError(campo, f"Campo '{campo}' não pode ser nulo")

        if "cep" in dados:
            dados["cep"] = exigir_cep(dados["cep"])

        # Só verifica duplicata se campos críticos estão sendo alterados
        if any(campo in dados for campo in CAMPOS_CRITICOS):
            resultante = {campo: dados.get(campo, getattr(obj, campo)) for campo in CAMPOS_CRITICOS}
            if self.repo.endereco_existe(cliente.id, resultante, exclude_id=obj.id):
                raise ConflictError("Este endereço já existe para este cliente")

        try:
            return self.repo.update(obj, **dados)
        except IntegrityError as err:
            raise ConflictError("Outro endereço padrão foi gravado ao mesmo tempo, tente novamente") from err

    def set_padrao(self, cliente: ClienteModel, end_id: int):
        obj = self.get(cliente, end_id)
        try:
            return self.repo.set_padrao(obj)
        except IntegrityError as err:
            raise ConflictError("Outro endereço padrão foi gravado ao mesmo tempo, tente novamente") from err

    def delete(self, cliente: ClienteModel, end_id: int):
        obj = self.get(cliente, end_id)
        self.repo.delete(obj)
