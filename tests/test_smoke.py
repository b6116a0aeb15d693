"""
tests.test_smoke

Minimal smoke tests to validate both services can boot and serve core endpoints.

Responsibilities:
- Ensure both FastAPI apps answer the liveness check.
- Ensure the lifespan handler owns (creates and closes) the shared httpx client.
"""

from __future__ import annotations

import httpx
import pytest

from cep_weather.api.app import create_gateway_app, create_resolver_app
from cep_weather.settings import GatewaySettings, ResolverSettings
from tests.helpers import client_for


@pytest.mark.asyncio
async def test_health_endpoints(gateway_app, resolver_app) -> None:
    for app in (gateway_app, resolver_app):
        async with client_for(app) as client:
            r = await client.get("/healthz")
            assert r.status_code == 200
            assert r.json()["status"] == "ok"
            assert r.headers["x-request-id"]


@pytest.mark.asyncio
async def test_lifespan_owns_http_client() -> None:
    settings = GatewaySettings(env="test", resolver_base_url="http://resolver.test")
    app = create_gateway_app(settings=settings)
    assert app.state.http is None

    # httpx 0.28 ASGITransport does not manage lifespan automatically; do it explicitly.
    async with app.router.lifespan_context(app):
        http = app.state.http
        assert isinstance(http, httpx.AsyncClient)
        assert str(http.base_url).rstrip("/") == "http://resolver.test"
    assert http.is_closed
    assert app.state.http is None


@pytest.mark.asyncio
async def test_lifespan_leaves_injected_client_open() -> None:
    http = httpx.AsyncClient()
    app = create_resolver_app(settings=ResolverSettings(env="test"), http=http)
    try:
        async with app.router.lifespan_context(app):
            assert app.state.http is http
        assert not http.is_closed
    finally:
        await http.aclose()


# --- Module Notes -----------------------------------------------------------
# Provider-facing behaviour is covered in test_resolver/test_gateway with stubbed transports.
