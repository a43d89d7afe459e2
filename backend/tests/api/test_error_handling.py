"""Error handling — every code path answers exactly once, without leaking internals.

Invariants:
    - DatabaseError → 500 with the generic message, never the driver detail
    - Any other exception → 500 INTERNAL_ERROR via the catch-all handler
    - Unknown routes and wrong methods keep the {"error": ...} envelope

Design Decisions:
    - Failing repositories injected through dependency_overrides: no real outage needed
    - raise_app_exceptions=False for the catch-all case: Starlette re-raises after
      sending the 500, the test only cares about the response
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.api.dependencies import get_product_repository
from app.core.errors import DatabaseError, GENERIC_ERROR_MESSAGE
from app.main import app

BASE = "/api/products"


class _FailingRepository:
    """Repository whose every call fails with the configured exception."""

    def __init__(self, exc: Exception):
        self._exc = exc

    async def list_all(self):
        raise self._exc

    async def find_by_id(self, product_id, *, for_update=False):
        raise self._exc

    async def insert(self, fields):
        raise self._exc

    async def replace(self, product, fields):
        raise self._exc

    async def delete(self, product):
        raise self._exc


@pytest.fixture
async def failing_client():
    """Client factory: failing_client(exc) yields a client whose repository raises exc."""
    clients = []

    async def _make(exc: Exception) -> AsyncClient:
        app.dependency_overrides[get_product_repository] = lambda: _FailingRepository(exc)
        c = AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=False),
            base_url="http://test",
        )
        clients.append(c)
        return c

    yield _make

    for c in clients:
        await c.aclose()
    app.dependency_overrides.clear()


@pytest.mark.parametrize("method,path,body", [
    ("GET", BASE, None),
    ("GET", f"{BASE}/1", None),
    ("POST", BASE, {"name": "Monitor", "price": 300}),
    ("PUT", f"{BASE}/1", {"name": "Monitor", "price": 300}),
    ("PATCH", f"{BASE}/1", None),
    ("DELETE", f"{BASE}/1", None),
])
async def test_database_error_returns_generic_500(failing_client, method, path, body):
    client = await failing_client(
        DatabaseError("connection refused by 10.0.0.5", "execute"),
    )
    res = await client.request(method, path, json=body)

    assert res.status_code == 500
    payload = res.json()
    assert payload["error"] == GENERIC_ERROR_MESSAGE
    assert payload["code"] == "DATABASE_ERROR"
    assert "10.0.0.5" not in res.text


async def test_unexpected_exception_returns_internal_error(failing_client):
    client = await failing_client(RuntimeError("boom: secret detail"))
    res = await client.get(BASE)

    assert res.status_code == 500
    assert res.json()["code"] == "INTERNAL_ERROR"
    assert res.json()["error"] == GENERIC_ERROR_MESSAGE
    assert "secret detail" not in res.text


async def test_validation_still_wins_over_store_failure(failing_client):
    client = await failing_client(DatabaseError("down", "execute"))
    res = await client.get(f"{BASE}/abc")
    assert res.status_code == 400


async def test_unknown_route_uses_error_envelope(client):
    res = await client.get("/api/unknown")
    assert res.status_code == 404
    assert res.json()["error"] == "Not Found"


async def test_unsupported_method_uses_error_envelope(client):
    res = await client.post(f"{BASE}/1", json={})
    assert res.status_code == 405
    assert "error" in res.json()


async def test_request_validation_error_uses_domain_envelope(client, caplog):
    with caplog.at_level("WARNING", logger="app.api.error_handlers"):
        res = await client.put(f"{BASE}/abc", json={"name": "Desk", "price": 5})

    assert res.status_code == 400
    body = res.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["category"] == "validation"
    assert body["severity"] == "warning"
    assert body["errors"] == [{"field": "id", "message": "invalid id"}]
    assert "detail" not in body
    assert any("Validation error on" in r.getMessage() for r in caplog.records)
