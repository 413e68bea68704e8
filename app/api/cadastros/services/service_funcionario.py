from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from app.api.cadastros.repositories.repo_funcionario import FuncionarioRepository
from app.api.cadastros.repositories.repo_usuario import UsuarioRepository
from app.api.cadastros.schemas.schema_funcionario import FuncionarioCreate
from app.api.cadastros.services.validacao import exigir_cpf, exigir_telefone
from app.core.authorization import Ator
from app.core.exceptions import AuthorizationError, ConflictError, NotFoundError
from app.utils.database_utils import violou_unique
from app.utils.logger import logger


class FuncionarioService:
    def __init__(self, db: Session):
        self.repo = FuncionarioRepository(db)
        self.repo_usuario = UsuarioRepository(db)

    def create(self, ator: Ator, data: FuncionarioCreate):
        # checagem de papel antes de qualquer acesso ao banco
        if not ator.is_admin:
            logger.warning(f"[Funcionario] Criação negada - tipo={ator.tipo} id={ator.id} role={ator.role}")
            raise AuthorizationError("Apenas administradores podem criar funcionários")

        cpf = exigir_cpf(data.cpf)
        telefone = exigir_telefone(data.telefone)

        if not self.repo_usuario.get(data.usuario_id):
            raise NotFoundError("Usuário não encontrado")
        if self.repo.get_by_usuario_id(data.usuario_id):
            raise ConflictError("Usuário já possui perfil de funcionário")
        if self.repo.get_by_cpf(cpf):
            raise ConflictError("CPF já cadastrado")

        try:
            obj = self.repo.create(usuario_id=data.usuario_id, cpf=cpf, telefone=telefone)
        except IntegrityError as err:
            if violou_unique(err, "funcionarios", "cpf"):
                raise ConflictError("CPF já cadastrado") from err
            if violou_unique(err, "funcionarios", "usuario_id"):
                raise ConflictError("Usuário já possui perfil de funcionário") from err
            raise

        logger.info(f"[Funcionario] Criado id={obj.id} usuario={obj.usuario_id} por {ator.tipo}={ator.id}")
        return obj

    def list(self, skip: int = 0, limit: int = 100):
        return self.repo.list(skip=skip, limit=limit)

    def get_by_usuario_id(self, usuario_id: int):
        obj = self.repo.get_by_usuario_id(usuario_id)
        if not obj:
            raise NotFoundError("Perfil de funcionário não encontrado")
        return obj
