"""
Validadores e formatadores de documentos brasileiros (CPF, telefone, CEP) e email.

Funções puras: recebem uma string e devolvem bool (validade) ou a string
formatada. Nunca lançam exceção; quem chama converte um resultado negativo
em erro de validação antes de persistir qualquer coisa.
"""
import re

EMAIL_MAX_LEN = 320

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def limpar_numero(valor: str) -> str:
    """Remove tudo que não for dígito (pontos, traços, parênteses, espaços)."""
    return re.sub(r"[^0-9]", "", valor or "")


def _digitos_repetidos(digitos: str) -> bool:
    return len(set(digitos)) == 1


def _digito_verificador(digitos: str, peso_inicial: int) -> int:
    soma = sum(int(d) * (peso_inicial - i) for i, d in enumerate(digitos))
    resto = (soma * 10) % 11
    return 0 if resto in (10, 11) else resto


# ---------------------------------------------------------------------
# CPF
# ---------------------------------------------------------------------
def validar_cpf(cpf: str) -> bool:
    """
    Valida um CPF (formatado ou não) pelo algoritmo completo:
    - 11 dígitos após limpeza
    - rejeita sequências repetidas (ex.: 000.000.000-00), que passam no cálculo
    - confere os dois dígitos verificadores (módulo 11)
    """
    digitos = limpar_numero(cpf)

    if len(digitos) != 11:
        return False

    if _digitos_repetidos(digitos):
        return False

    # 1º dígito: pesos 10..2 sobre os 9 primeiros
    if _digito_verificador(digitos[:9], 10) != int(digitos[9]):
        return False

    # 2º dígito: pesos 11..2 sobre os 10 primeiros
    if _digito_verificador(digitos[:10], 11) != int(digitos[10]):
        return False

    return True


def formatar_cpf(cpf: str) -> str:
    """Formata para XXX.XXX.XXX-XX; se não houver 11 dígitos, devolve só os dígitos."""
    digitos = limpar_numero(cpf)[:11]
    if len(digitos) != 11:
        return digitos
    return f"{digitos[:3]}.{digitos[3:6]}.{digitos[6:9]}-{digitos[9:]}"


# ---------------------------------------------------------------------
# Telefone
# ---------------------------------------------------------------------
def validar_telefone(telefone: str) -> bool:
    """
    Valida telefone brasileiro com DDD (10 ou 11 dígitos).

    - DDD entre 11 e 99
    - celular (11 dígitos): 3º dígito deve ser 9
    - fixo (10 dígitos): 1º dígito após o DDD entre 2 e 9
    """
    digitos = limpar_numero(telefone)
    tamanho = len(digitos)

    if tamanho not in (10, 11):
        return False

    if _digitos_repetidos(digitos):
        return False

    ddd = int(digitos[:2])
    if ddd < 11 or ddd > 99:
        return False

    if tamanho == 11 and digitos[2] != "9":
        return False

    if tamanho == 10 and digitos[2] not in "23456789":
        return False

    return True


def formatar_telefone(telefone: str) -> str:
    digitos = limpar_numero(telefone)
    if len(digitos) == 11:
        return f"({digitos[:2]}) {digitos[2:7]}-{digitos[7:]}"
    if len(digitos) == 10:
        return f"({digitos[:2]}) {digitos[2:6]}-{digitos[6:]}"
    return digitos


# ---------------------------------------------------------------------
# Email
# ---------------------------------------------------------------------
def validar_email(email: str) -> bool:
    """Validação apenas sintática (sem DNS): sem espaços, até 320 caracteres, usuario@dominio.tld."""
    if email is None:
        return False
    if any(c.isspace() for c in email):
        return False
    if len(email) > EMAIL_MAX_LEN:
        return False
    return _EMAIL_RE.match(email) is not None


# ---------------------------------------------------------------------
# CEP
# ---------------------------------------------------------------------
def validar_cep(cep: str) -> bool:
    return len(limpar_numero(cep)) == 8


def formatar_cep(cep: str) -> str:
    digitos = limpar_numero(cep)[:8]
    if len(digitos) != 8:
        return digitos
    return f"{digitos[:5]}-{digitos[5:]}"
