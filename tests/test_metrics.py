from fastapi.testclient import TestClient

from app.main import app
from app.utils.prometheus_metrics import normalizar_endpoint

client = TestClient(app)


def test_normalizar_endpoint():
    assert normalizar_endpoint("/api/cadastros/client/enderecos/42") == "/api/cadastros/client/enderecos/{id}"
    assert normalizar_endpoint("/api/catalogo/public/produtos") == "/api/catalogo/public/produtos"


def test_metrics_expoe_contadores():
    client.get("/health")
    resp = client.get("/metrics")
    assert resp.status_code == 200
    assert "http_requests_total" in resp.text
    assert "cadastros_rejeitados_total" in resp.text
