"""
Módulo de métricas Prometheus para monitoramento da aplicação.
"""
import re
from time import time
from typing import Callable

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, Gauge, generate_latest
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

# Métricas de requisições HTTP
http_requests_total = Counter(
    'http_requests_total',
    'Total de requisições HTTP',
    ['method', 'endpoint', 'status_code']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'Duração das requisições HTTP em segundos',
    ['method', 'endpoint'],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.5, 5.0, 10.0]
)

# Métricas de erros
http_errors_total = Counter(
    'http_errors_total',
    'Total de erros HTTP',
    ['method', 'endpoint', 'status_code']
)

active_connections = Gauge(
    'active_connections',
    'Número de conexões ativas'
)

# Métricas de logs
log_messages_total = Counter(
    'log_messages_total',
    'Total de mensagens de log',
    ['level']
)

# Métricas de negócio
cadastros_rejeitados_total = Counter(
    'cadastros_rejeitados_total',
    'Cadastros rejeitados por validação de documento',
    ['campo']
)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Middleware para coletar métricas Prometheus das requisições HTTP."""

    async def dispatch(self, request: Request, call_next: Callable):
        # Ignora o endpoint de métricas para evitar loop
        if request.url.path == "/metrics":
            return await call_next(request)

        method = request.method
        # Normaliza endpoint (remove IDs para evitar cardinalidade alta)
        endpoint = normalizar_endpoint(request.url.path)

        start_time = time()
        active_connections.inc()

        try:
            response = await call_next(request)
            status_code = response.status_code

            http_requests_total.labels(method=method, endpoint=endpoint, status_code=status_code).inc()
            http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(time() - start_time)

            # Registra erros (4xx e 5xx)
            if status_code >= 400:
                http_errors_total.labels(method=method, endpoint=endpoint, status_code=status_code).inc()

            return response

        except Exception:
            http_requests_total.labels(method=method, endpoint=endpoint, status_code=500).inc()
            http_errors_total.labels(method=method, endpoint=endpoint, status_code=500).inc()
            raise
        finally:
            active_connections.dec()


def normalizar_endpoint(endpoint: str) -> str:
    """
    Normaliza endpoints removendo IDs para evitar alta cardinalidade.
    Ex: /api/cadastros/client/enderecos/123 -> /api/cadastros/client/enderecos/{id}
    """
    return re.sub(r'/\d+', '/{id}', endpoint)


def get_metrics():
    """Retorna as métricas no formato Prometheus."""
    return generate_latest()


def record_log(level: str):
    """Registra uma mensagem de log nas métricas."""
    log_messages_total.labels(level=level).inc()


def record_cadastro_rejeitado(campo: str):
    cadastros_rejeitados_total.labels(campo=campo).inc()
