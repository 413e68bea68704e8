from datetime import datetime
from zoneinfo import ZoneInfo

from sqlalchemy.exc import IntegrityError

TZ_SP = ZoneInfo('America/Sao_Paulo')


def now_trimmed():
    """Retorna datetime atual em timezone de São Paulo, sem microsegundos"""
    return datetime.now(TZ_SP).replace(microsecond=0)


def violou_unique(err: IntegrityError, tabela: str, coluna: str) -> bool:
    """
    Diz se o IntegrityError veio da unicidade de `tabela.coluna`.

    Postgres informa o nome da constraint em `diag.constraint_name`
    (ex.: clientes_cpf_key); SQLite só na mensagem (UNIQUE constraint failed: clientes.cpf).
    """
    constraint = getattr(getattr(err.orig, "diag", None), "constraint_name", "") or ""
    message = str(err.orig).lower()
    return (
        constraint == f"{tabela}_{coluna}_key"
        or f"{tabela}_{coluna}_key" in message
        or f"{tabela}.{coluna}" in message
    )
