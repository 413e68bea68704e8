"""
Services de Cadastros
Centraliza todos os services relacionados a entidades de cadastro
"""

from app.api.cadastros.services.service_cliente import ClienteService
from app.api.cadastros.services.service_funcionario import FuncionarioService
from app.api.cadastros.services.service_endereco import EnderecosService
