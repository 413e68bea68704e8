from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, constr, field_serializer, model_validator

from app.utils.validadores import formatar_cpf, formatar_telefone


class ClienteOut(BaseModel):
    id: int
    usuario_id: int
    nome: Optional[str] = None
    email: Optional[str] = None
    cpf: str
    telefone: str
    foto_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("cpf")
    def _cpf(self, v: str) -> str:
        return formatar_cpf(v)

    @field_serializer("telefone")
    def _telefone(self, v: str) -> str:
        return formatar_telefone(v)


class ClienteCreate(BaseModel):
    """Perfil de cliente para o usuário já autenticado."""
    cpf: constr(min_length=11, max_length=14)
    telefone: constr(min_length=10, max_length=20)
    foto_base64: Optional[str] = None


class ClienteUpdate(BaseModel):
    telefone: Optional[constr(min_length=10, max_length=20)] = None
    foto_base64: Optional[str] = None


class ClienteSignup(BaseModel):
    """Cadastro direto (sem OAuth): cria usuário com senha e perfil de cliente."""
    nome: constr(min_length=1, max_length=255)
    email: constr(min_length=3, max_length=320)
    telefone: constr(min_length=10, max_length=20)
    cpf: constr(min_length=11, max_length=14)
    senha: constr(min_length=6, max_length=72)
    confirmar_senha: str

    @model_validator(mode="after")
    def _senhas_conferem(self):
        if self.senha != self.confirmar_senha:
            raise ValueError("As senhas não conferem")
        return self
