from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, constr, field_serializer, field_validator

from app.utils.validadores import formatar_cep


def _estado_upper(v):
    if isinstance(v, str):
        return v.strip().upper()
    return v


class EnderecoCreate(BaseModel):
    cep: constr(min_length=8, max_length=9)
    logradouro: constr(min_length=3, max_length=255)
    numero: constr(min_length=1, max_length=20)
    bairro: constr(min_length=3, max_length=100)
    cidade: constr(min_length=3, max_length=100)
    estado: constr(min_length=2, max_length=2)
    complemento: Optional[str] = None
    is_default: bool = False

    @field_validator("estado", mode="before")
    @classmethod
    def validar_estado(cls, v):
        return _estado_upper(v)


class EnderecoUpdate(BaseModel):
    cep: Optional[constr(min_length=8, max_length=9)] = None
    logradouro: Optional[constr(min_length=3, max_length=255)] = None
    numero: Optional[constr(min_length=1, max_length=20)] = None
    bairro: Optional[constr(min_length=3, max_length=100)] = None
    cidade: Optional[constr(min_length=3, max_length=100)] = None
    estado: Optional[constr(min_length=2, max_length=2)] = None
    complemento: Optional[str] = None
    is_default: Optional[bool] = None

    @field_validator("estado", mode="before")
    @classmethod
    def validar_estado(cls, v):
        return _estado_upper(v)


class EnderecoOut(BaseModel):
    id: int
    cliente_id: int
    cep: str
    logradouro: str
    numero: str
    bairro: str
    cidade: str
    estado: str
    complemento: Optional[str] = None
    is_default: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("cep")
    def _cep(self, v: str) -> str:
        return formatar_cep(v)
