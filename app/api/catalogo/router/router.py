from fastapi import APIRouter
from app.api.catalogo.router.admin import router_produtos
from app.api.catalogo.router.public import router_produtos as router_produtos_public

router = APIRouter()

# Rotas admin (usam autenticação de admin)
router.include_router(router_produtos.router)

# Rotas públicas (sem autenticação)
router.include_router(router_produtos_public.router)
