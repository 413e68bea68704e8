"""
Repositories de Cadastros
Centraliza todos os repositories relacionados a entidades de cadastro
"""

from app.api.cadastros.repositories.repo_usuario import UsuarioRepository
from app.api.cadastros.repositories.repo_cliente import ClienteRepository
from app.api.cadastros.repositories.repo_funcionario import FuncionarioRepository
from app.api.cadastros.repositories.repo_endereco import EnderecoRepository
