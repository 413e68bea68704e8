from .router_funcionarios import router as router_funcionarios

__all__ = [
    "router_funcionarios",
]
