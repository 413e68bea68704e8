"""
Converte o resultado dos validadores em ValidationError antes de qualquer
escrita no banco. Devolve o valor já limpo (somente dígitos) para persistir.
"""
from app.core.exceptions import ValidationError
from app.utils.logger import logger
from app.utils.prometheus_metrics import record_cadastro_rejeitado
from app.utils.validadores import (
    limpar_numero,
    validar_cep,
    validar_cpf,
    validar_email,
    validar_telefone,
)


def _rejeitar(campo: str, mensagem: str) -> ValidationError:
    logger.warning(f"[Validação] {campo} rejeitado")
    record_cadastro_rejeitado(campo)
    return ValidationError(campo, mensagem)


def exigir_cpf(cpf: str) -> str:
    if not validar_cpf(cpf):
        raise _rejeitar("cpf", "CPF inválido")
    return limpar_numero(cpf)


def exigir_telefone(telefone: str) -> str:
    if not validar_telefone(telefone):
        raise _rejeitar("telefone", "Telefone inválido")
    return limpar_numero(telefone)


def exigir_cep(cep: str) -> str:
    if not validar_cep(cep):
        raise _rejeitar("cep", "CEP inválido")
    return limpar_numero(cep)


def exigir_email(email: str) -> str:
    if not validar_email(email):
        raise _rejeitar("email", "Email inválido")
    return email.lower()
