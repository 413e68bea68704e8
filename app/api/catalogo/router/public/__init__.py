# Public routers
from . import router_produtos

__all__ = [
    "router_produtos",
]
