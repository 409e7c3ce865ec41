"""
Tests for the POST /api/lookup endpoint.
"""
from __future__ import annotations

import httpx
import pytest
import respx
from fastapi.testclient import TestClient
from httpx import Response

from adapters.record_sources import CuitOnlineSource, DatuarSource
from api.app import create_app
from api.dependencies import get_app_settings, get_sources


@pytest.fixture
def make_client(settings):
    def _make(sources):
        app = create_app()
        app.dependency_overrides[get_app_settings] = lambda: settings
        app.dependency_overrides[get_sources] = lambda: tuple(sources)
        return TestClient(app, raise_server_exceptions=False)

    return _make


def test_partial_success_with_timeout(make_client, settings, noise_filter, make_datuar_html):
    sources = [
        DatuarSource(settings, noise_filter=noise_filter),
        CuitOnlineSource(settings, noise_filter=noise_filter),
    ]
    client = make_client(sources)

    with respx.mock:
        respx.post("https://datuar.com/pedido.php").mock(
            return_value=Response(200, text=make_datuar_html("PEREZ JUAN CARLOS", "Av. Siempreviva 742"))
        )
        respx.get("https://www.cuitonline.com/search.php").mock(side_effect=httpx.ReadTimeout("timed out"))

        response = client.post("/api/lookup", json={"dni": "12345678"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert "error" not in body

    data = body["data"]
    assert data["engineVersion"] == "osint-dni/test"
    assert data["searchId"]
    assert data["timestamp"]
    assert [s["sourceName"] for s in data["sources"]] == ["Datuar", "CuitOnline"]

    first, second = data["sources"]
    assert first["status"] == "success"
    assert first["category"] == "Personal"
    assert first["items"] == ["PEREZ JUAN CARLOS", "Av. Siempreviva 742"]
    assert "message" not in first
    assert second["status"] == "error"
    assert second["items"] == []
    assert second["message"] == "CuitOnline no respondió a tiempo."


@pytest.mark.parametrize(
    "payload",
    [{"dni": "abc123"}, {"dni": ""}, {"dni": 12345678}, {}, ["12345678"]],
)
def test_invalid_dni_returns_400(make_client, fake_source, payload):
    source = fake_source("X", items=["PEREZ JUAN"])
    client = make_client([source])

    response = client.post("/api/lookup", json=payload)

    assert response.status_code == 400
    body = response.json()
    assert body == {"success": False, "error": "Un número de DNI válido es requerido."}
    assert "data" not in body
    assert source.calls == []


def test_malformed_json_returns_400(make_client, fake_source):
    client = make_client([fake_source("X", items=["PEREZ JUAN"])])

    response = client.post(
        "/api/lookup",
        content=b"{dni: 1",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_all_sources_empty_returns_404(make_client, settings, noise_filter, make_datuar_html):
    client = make_client([DatuarSource(settings, noise_filter=noise_filter)])

    with respx.mock:
        respx.post("https://datuar.com/pedido.php").mock(
            return_value=Response(200, text=make_datuar_html("Publicidad", "12", "..."))
        )
        response = client.post("/api/lookup", json={"dni": "99999999"})

    assert response.status_code == 404
    assert response.json() == {
        "success": False,
        "error": "No se encontraron resultados para el DNI ingresado.",
    }


def test_all_sources_unreachable_returns_502(make_client, fake_source):
    client = make_client([fake_source("X", reason="transport"), fake_source("Y", reason="timeout")])

    response = client.post("/api/lookup", json={"dni": "12345678"})

    assert response.status_code == 502
    assert response.json() == {"success": False, "error": "Error al conectar con los servicios externos."}


def test_unexpected_fault_returns_generic_500(make_client, fake_source):
    client = make_client([fake_source("X", exc=RuntimeError("secret stack detail"))])

    response = client.post("/api/lookup", json={"dni": "12345678"})

    assert response.status_code == 500
    body = response.json()
    assert body == {"success": False, "error": "Error interno al procesar la solicitud."}
    assert "secret" not in response.text


def test_health(make_client, fake_source):
    client = make_client([fake_source("X")])

    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "engineVersion": "osint-dni/test"}


def test_sources_are_built_from_injected_settings(settings, make_datuar_html):
    custom = settings.model_copy(update={"user_agent": "osint-dni-test-agent"})
    app = create_app()
    app.dependency_overrides[get_app_settings] = lambda: custom
    client = TestClient(app, raise_server_exceptions=False)

    with respx.mock:
        datuar = respx.post("https://datuar.com/pedido.php").mock(
            return_value=Response(200, text=make_datuar_html("PEREZ JUAN CARLOS"))
        )
        respx.get("https://www.cuitonline.com/search.php").mock(return_value=Response(200, text="<html></html>"))
        respx.get("https://www.dateas.com/es/consulta_cuit_cuil").mock(
            return_value=Response(200, text="<html></html>")
        )

        response = client.post("/api/lookup", json={"dni": "12345678"})
        user_agent = datuar.calls.last.request.headers["User-Agent"]

    assert response.status_code == 200
    assert user_agent == "osint-dni-test-agent"
    data = response.json()["data"]
    assert [s["sourceName"] for s in data["sources"]] == ["Datuar", "CuitOnline", "Dateas"]
    assert data["engineVersion"] == "osint-dni/test"
