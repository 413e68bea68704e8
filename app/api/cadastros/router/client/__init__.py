from .router_clientes import router as router_clientes
from .router_enderecos import router as router_enderecos
from .router_funcionarios import router as router_funcionarios

__all__ = [
    "router_clientes",
    "router_enderecos",
    "router_funcionarios",
]
