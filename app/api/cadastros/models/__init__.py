"""
Models de Cadastros
Centraliza todos os models relacionados a entidades de cadastro
"""

# Importar todos os models para garantir registro no SQLAlchemy
from app.api.cadastros.models.user_model import UserModel
from app.api.cadastros.models.model_cliente import ClienteModel
from app.api.cadastros.models.model_funcionario import FuncionarioModel
from app.api.cadastros.models.model_endereco import EnderecoModel
from app.api.cadastros.models.model_admin import AdminModel

__all__ = [
    "UserModel",
    "ClienteModel",
    "FuncionarioModel",
    "EnderecoModel",
    "AdminModel",
]
