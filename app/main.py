from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import Response

from app.config.settings import CORS_ORIGINS, CORS_ALLOW_ALL, BASE_URL, ENABLE_DOCS
from app.core.exception_handlers import (
    validation_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from app.utils.logger import logger
from app.utils.prometheus_metrics import PrometheusMiddleware, get_metrics, CONTENT_TYPE_LATEST

# ───────────────────────────
# Importar modelos antes das rotas
# Garante que todos os modelos estejam registrados no SQLAlchemy
# antes de qualquer query ser executada
# ───────────────────────────
from app.api.cadastros import models as cadastros_models  # noqa: F401
from app.api.catalogo import models as catalogo_models  # noqa: F401

from app.api.auth import auth_controller
from app.api.cadastros.router.router import api_cadastros
from app.api.catalogo.router.router import router as catalogo_router


# ──────────────────────────
# Instância FastAPI
# ──────────────────────────
app = FastAPI(
    title="Aaron Bike API",
    version="1.0.0",
    description="Cadastro de clientes, endereços, funcionários e catálogo de produtos",
    docs_url=("/swagger" if ENABLE_DOCS else None),
    redoc_url=("/redoc" if ENABLE_DOCS else None),
    openapi_url=("/openapi.json" if ENABLE_DOCS else None),
    servers=([{"url": BASE_URL, "description": "Base URL do ambiente"}] if BASE_URL else None),
    redirect_slashes=False  # Evita redirecionamento 307 quando URL não termina com /
)

# ───────────────────────────
# Exception Handlers Globais
# ───────────────────────────
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# ───────────────────────────
# Middlewares
# ───────────────────────────
# Middlewares são executados na ORDEM REVERSA da adição (último adicionado = primeiro executado)
app.add_middleware(PrometheusMiddleware)

# CORS (adicionado por último, será executado primeiro)
# - Se CORS_ALLOW_ALL=true => allow_origins=["*"], allow_credentials=False
# - Caso contrário => allow_origins=CORS_ORIGINS (se vazio cai para ["*"]), allow_credentials=True somente quando houver origens explícitas
if CORS_ALLOW_ALL:
    allowed_origins = ["*"]
    allow_credentials = False
else:
    allowed_origins = CORS_ORIGINS or ["*"]
    allow_credentials = bool(CORS_ORIGINS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ───────────────────────────
# Startup / Shutdown
# ───────────────────────────
@app.on_event("startup")
def startup():
    from app.database.init_db import inicializar_banco

    logger.info("Iniciando API e banco de dados...")
    inicializar_banco()
    logger.info("API iniciada com sucesso.")


@app.on_event("shutdown")
def shutdown():
    logger.info("API encerrada.")


# ───────────────────────────
# Rotas
# ───────────────────────────
@app.get("/")
async def root():
    return {"status": "ok", "message": "API is running"}


@app.get("/health")
async def health():
    return {"status": "healthy"}


@app.get("/metrics", include_in_schema=False)
def metrics():
    """Endpoint de métricas Prometheus (público, sem autenticação)."""
    return Response(content=get_metrics(), media_type=CONTENT_TYPE_LATEST)


app.include_router(auth_controller.router)
app.include_router(api_cadastros)
app.include_router(catalogo_router)


# ───────────────────────────
# OpenAPI: Segurança Bearer/JWT no Swagger
# ───────────────────────────
PUBLIC_PATHS = {
    "/",
    "/health",
    "/api/auth/client/signup",
    "/api/auth/client/login",
    "/api/auth/oauth/session",
    "/api/auth/admin/login",
}


def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
        servers=app.servers,
    )

    components = openapi_schema.get("components", {})
    security_schemes = components.get("securitySchemes", {})
    security_schemes.update({
        "bearerAuth": {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
        }
    })
    components["securitySchemes"] = security_schemes
    openapi_schema["components"] = components

    # Define segurança global
    openapi_schema["security"] = [{"bearerAuth": []}]

    # Remover exigência de token de endpoints públicos
    for path, methods in openapi_schema.get("paths", {}).items():
        if path in PUBLIC_PATHS or path.startswith("/api/catalogo/public"):
            for method_obj in methods.values():
                method_obj["security"] = []

    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi
