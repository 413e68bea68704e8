# app/api/auth/schema_auth.py
from pydantic import BaseModel, ConfigDict


class LoginRequest(BaseModel):
    username: str
    password: str


class ClienteLoginRequest(BaseModel):
    email: str
    senha: str


class TokenResponse(BaseModel):
    token_type: str = "Bearer"
    tipo: str = "usuario"
    role: str = "user"
    access_token: str
    model_config = ConfigDict(from_attributes=True)
