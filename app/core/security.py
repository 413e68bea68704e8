# app/core/security.py
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from passlib.context import CryptContext
from jose import JWTError, jwt
from app.config.settings import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES

# Validação de SECRET_KEY
if not SECRET_KEY or not isinstance(SECRET_KEY, str):
    raise RuntimeError("SECRET_KEY não configurada. Defina SECRET_KEY no .env ou variáveis de ambiente.")

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Tipos de sessão aceitos no claim "tipo"
TIPO_USUARIO = "usuario"
TIPO_ADMIN = "admin"


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """
    Compara senha em texto plano com o hash armazenado no banco.
    Sem hash (registro inexistente ou usuário OAuth) o custo do bcrypt é
    simulado, para o tempo de resposta não revelar quais contas existem.
    """
    if not hashed_password:
        pwd_context.dummy_verify()
        return False
    return pwd_context.verify(plain_password, hashed_password)


def hash_password(password: str) -> str:
    """ Gera hash bcrypt para armazenar no cadastro. """
    return pwd_context.hash(password)


def create_access_token(data: dict, expires_delta: timedelta = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({
        "exp": expire,
        # garante que sempre é string:
        "sub": str(to_encode.get("sub", ""))
    })
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> Tuple[str, int]:
    """
    Decodifica o token de sessão e devolve (tipo, id do sujeito).
    Lança JWTError/ValueError se a assinatura, a expiração ou o conteúdo não conferirem.
    """
    payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    tipo = payload.get("tipo")
    if tipo not in (TIPO_USUARIO, TIPO_ADMIN):
        raise JWTError("Tipo de sessão inválido")
    raw_sub = payload.get("sub")
    if raw_sub is None:
        raise JWTError("Token sem sujeito")
    return tipo, int(raw_sub)
