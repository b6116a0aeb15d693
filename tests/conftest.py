"""
tests.conftest

Shared fixtures for gateway/resolver tests.

Responsibilities:
- Install a process-wide tracer provider that records spans in memory.
- Stub the location and weather providers with `httpx.MockTransport`.
- Build in-process resolver and gateway apps (gateway -> resolver over ASGITransport).
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

import httpx
import pytest
from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from cep_weather.api.app import create_gateway_app, create_resolver_app
from cep_weather.observability.tracing import build_http_client
from cep_weather.settings import GatewaySettings, ResolverSettings
from tests.helpers import RESOLVER_URL, VIACEP_URL, WEATHER_URL, Handler, json_handler


@dataclass
class Providers:
    """
    Routes stubbed provider traffic by host and records every request.
    """

    location: Handler
    weather: Handler
    calls: list[httpx.Request] = field(default_factory=list)

    async def handle(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        if request.url.host == "viacep.test":
            result = self.location(request)
        elif request.url.host == "weather.test":
            result = self.weather(request)
        else:
            raise AssertionError(f"unexpected outbound call: {request.url}")
        if inspect.isawaitable(result):
            result = await result
        return result

    def calls_to(self, host: str) -> list[httpx.Request]:
        return [r for r in self.calls if r.url.host == host]


@pytest.fixture(scope="session")
def tracer_provider() -> TracerProvider:
    provider = trace.get_tracer_provider()
    if not hasattr(provider, "add_span_processor"):
        provider = TracerProvider()
        trace.set_tracer_provider(provider)
    return provider  # type: ignore[return-value]


@pytest.fixture(scope="session")
def span_exporter(tracer_provider: TracerProvider) -> InMemorySpanExporter:
    exporter = InMemorySpanExporter()
    tracer_provider.add_span_processor(SimpleSpanProcessor(exporter))
    return exporter


@pytest.fixture(autouse=True)
def spans(span_exporter: InMemorySpanExporter) -> Iterator[InMemorySpanExporter]:
    span_exporter.clear()
    try:
        yield span_exporter
    finally:
        span_exporter.clear()


@pytest.fixture
def providers() -> Providers:
    return Providers(
        location=json_handler(200, {"localidade": "São Paulo", "erro": ""}),
        weather=json_handler(200, {"current": {"temp_c": 22.5}}),
    )


@pytest.fixture
def resolver_settings() -> ResolverSettings:
    return ResolverSettings(
        env="test",
        weather_api_key="test-key",
        viacep_base_url=VIACEP_URL,
        weather_api_base_url=WEATHER_URL,
    )


@pytest.fixture
def gateway_settings() -> GatewaySettings:
    return GatewaySettings(env="test", resolver_base_url=RESOLVER_URL)


@pytest.fixture
def make_resolver_app(providers: Providers) -> Callable[[ResolverSettings], FastAPI]:
    def _make(settings: ResolverSettings) -> FastAPI:
        http = build_http_client(
            timeout_seconds=settings.request_timeout_seconds,
            transport=httpx.MockTransport(providers.handle),
        )
        return create_resolver_app(settings=settings, http=http)

    return _make


@pytest.fixture
def resolver_app(
    make_resolver_app: Callable[[ResolverSettings], FastAPI],
    resolver_settings: ResolverSettings,
) -> FastAPI:
    return make_resolver_app(resolver_settings)


@pytest.fixture
def make_gateway_app(
    gateway_settings: GatewaySettings,
) -> Callable[..., FastAPI]:
    def _make(
        transport: httpx.AsyncBaseTransport, settings: GatewaySettings | None = None
    ) -> FastAPI:
        settings = settings or gateway_settings
        http = build_http_client(
            base_url=settings.resolver_base_url,
            timeout_seconds=settings.request_timeout_seconds,
            transport=transport,
        )
        return create_gateway_app(settings=settings, http=http)

    return _make


@pytest.fixture
def gateway_app(make_gateway_app: Callable[..., FastAPI], resolver_app: FastAPI) -> FastAPI:
    # Gateway talks to a real in-process resolver; no sockets involved.
    return make_gateway_app(httpx.ASGITransport(app=resolver_app))


# --- Module Notes -----------------------------------------------------------
# The tracer provider is process-global and can only be set once, hence the session scope;
# the autouse `spans` fixture keeps per-test span assertions isolated.
