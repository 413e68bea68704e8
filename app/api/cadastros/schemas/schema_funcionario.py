from datetime import datetime
from pydantic import BaseModel, ConfigDict, constr, field_serializer

from app.utils.validadores import formatar_cpf, formatar_telefone


class FuncionarioCreate(BaseModel):
    usuario_id: int
    cpf: constr(min_length=11, max_length=14)
    telefone: constr(min_length=10, max_length=20)


class FuncionarioOut(BaseModel):
    id: int
    usuario_id: int
    cpf: str
    telefone: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("cpf")
    def _cpf(self, v: str) -> str:
        return formatar_cpf(v)

    @field_serializer("telefone")
    def _telefone(self, v: str) -> str:
        return formatar_telefone(v)
