"""
Erros de domínio da API.

Todos herdam de HTTPException para passarem pelos mesmos handlers globais
(log + serialização) que as demais exceções HTTP.
"""
from typing import Optional

from fastapi import HTTPException, status


class ValidationError(HTTPException):
    """Dado malformado (CPF, telefone, CEP, email, tamanho de campo)."""

    def __init__(self, field: str, detail: str):
        super().__init__(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=detail)
        self.field = field


class ConflictError(HTTPException):
    """Registro duplicado (CPF, email, perfil já existente)."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class AuthorizationError(HTTPException):
    def __init__(self, detail: str = "Você não tem permissão para acessar este recurso"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class NotFoundError(HTTPException):
    """Recurso inexistente ou que não pertence ao solicitante (mesma resposta nos dois casos)."""

    def __init__(self, detail: str = "Registro não encontrado"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class AuthenticationError(HTTPException):
    """Credenciais inválidas; a mensagem nunca indica qual parte falhou."""

    def __init__(self, detail: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail or "Credenciais inválidas",
            headers={"WWW-Authenticate": "Bearer"},
        )


class StorageError(HTTPException):
    def __init__(self, detail: str = "Falha ao fazer upload da foto"):
        super().__init__(status_code=status.HTTP_502_BAD_GATEWAY, detail=detail)
