# app/api/cadastros/router/router.py

from fastapi import APIRouter

from app.api.cadastros.router.admin import router_funcionarios
from app.api.cadastros.router.client import (
    router_clientes as router_clientes_client,
    router_enderecos as router_enderecos_client,
    router_funcionarios as router_funcionarios_client,
)

api_cadastros = APIRouter(
    tags=["API - Cadastros"]
)

# Routers para clientes (sessão de usuário)
api_cadastros.include_router(router_clientes_client)
api_cadastros.include_router(router_enderecos_client)
api_cadastros.include_router(router_funcionarios_client)

# Routers para admin (ator com papel admin)
api_cadastros.include_router(router_funcionarios)
