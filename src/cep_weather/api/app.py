"""
cep_weather.api.app

FastAPI app factories for the gateway and resolver services.

Responsibilities:
- Build each FastAPI application and register routers/middleware/handlers.
- Own the shared httpx client (trace-propagating) for the app's lifetime.
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from cep_weather import __version__
from cep_weather.api.responses import plain_http_exception_handler
from cep_weather.api.routers.cep import router as cep_router
from cep_weather.api.routers.health import router as health_router
from cep_weather.api.routers.weather import router as weather_router
from cep_weather.observability.logging import configure_logging, get_logger
from cep_weather.observability.middleware import RequestContextMiddleware
from cep_weather.observability.tracing import build_http_client
from cep_weather.settings import GatewaySettings, ResolverSettings, ServiceSettings

log = get_logger(__name__)


def _lifespan(settings: ServiceSettings, build: Callable[[], httpx.AsyncClient]):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, service_name=settings.service_name)
        # An injected client (tests, embedding) belongs to the caller.
        owned: httpx.AsyncClient | None = None
        if getattr(app.state, "http", None) is None:
            owned = build()
            app.state.http = owned
        try:
            yield
        finally:
            if owned is not None:
                await owned.aclose()
                app.state.http = None
            log.info("shutdown")

    return lifespan


def _base_app(
    *,
    title: str,
    settings: ServiceSettings,
    http: httpx.AsyncClient | None,
    build: Callable[[], httpx.AsyncClient],
) -> FastAPI:
    # Configure structured logging once at process startup (before app serves requests).
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    app = FastAPI(
        title=title,
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=_lifespan(settings, build),
        # RequestContextMiddleware owns the server span. FastAPI's native request
        # tracing (newer releases) would open a second, unparented one.
        telemetry={"tracing": False},
    )
    app.state.settings = settings
    app.state.http = http

    app.add_middleware(RequestContextMiddleware)
    app.add_exception_handler(StarletteHTTPException, plain_http_exception_handler)
    app.include_router(health_router, tags=["health"])
    return app


def create_gateway_app(
    *, settings: GatewaySettings, http: httpx.AsyncClient | None = None
) -> FastAPI:
    """
    Gateway: `POST /cep` -> resolver. `http` must carry the resolver base URL.
    """

    app = _base_app(
        title="CEP Weather Gateway",
        settings=settings,
        http=http,
        build=lambda: build_http_client(
            base_url=settings.resolver_base_url,
            timeout_seconds=settings.request_timeout_seconds,
        ),
    )
    app.include_router(cep_router)
    return app


def create_resolver_app(
    *, settings: ResolverSettings, http: httpx.AsyncClient | None = None
) -> FastAPI:
    """
    Resolver: `GET /weather` -> ViaCEP -> WeatherAPI.
    """

    app = _base_app(
        title="CEP Weather Resolver",
        settings=settings,
        http=http,
        build=lambda: build_http_client(timeout_seconds=settings.request_timeout_seconds),
    )
    app.include_router(weather_router)
    return app


# --- Module Notes -----------------------------------------------------------
# Tracing is configured by the process entrypoint (`cep_weather.api.__main__`), not here:
# the tracer provider is process-global and can only be installed once.
