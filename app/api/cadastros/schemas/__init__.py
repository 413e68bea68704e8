"""
Schemas de Cadastros
Centraliza todos os schemas relacionados a CRUD de entidades de cadastro:
- Usuários
- Clientes
- Funcionários
- Endereços
- Admins
"""

from app.api.cadastros.schemas.schema_usuario import *
from app.api.cadastros.schemas.schema_cliente import *
from app.api.cadastros.schemas.schema_funcionario import *
from app.api.cadastros.schemas.schema_endereco import *
from app.api.cadastros.schemas.schema_admin import *
