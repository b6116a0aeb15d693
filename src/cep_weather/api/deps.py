"""
cep_weather.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Encapsulate app.state access patterns (settings, shared httpx client).
- Build per-request service objects from the app-wide configuration.
"""

from __future__ import annotations

import httpx
from fastapi import Depends, Request

from cep_weather.services.forwarding import GatewayForwarder
from cep_weather.services.weather_pipeline import WeatherPipeline
from cep_weather.settings import GatewaySettings, ResolverSettings


def http_client_from_app(request: Request) -> httpx.AsyncClient:
    # Created by the app factory or the lifespan handler (see `cep_weather.api.app`).
    return request.app.state.http  # type: ignore[attr-defined]


def gateway_settings_from_app(request: Request) -> GatewaySettings:
    return request.app.state.settings  # type: ignore[attr-defined]


def resolver_settings_from_app(request: Request) -> ResolverSettings:
    return request.app.state.settings  # type: ignore[attr-defined]


def gateway_forwarder(
    settings: GatewaySettings = Depends(gateway_settings_from_app),
    http: httpx.AsyncClient = Depends(http_client_from_app),
) -> GatewayForwarder:
    return GatewayForwarder(settings=settings, http=http)


def weather_pipeline(
    settings: ResolverSettings = Depends(resolver_settings_from_app),
    http: httpx.AsyncClient = Depends(http_client_from_app),
) -> WeatherPipeline:
    return WeatherPipeline(settings=settings, http=http)


# --- Module Notes -----------------------------------------------------------
# Settings come from app.state rather than `get_*_settings()` so tests can build apps
# with explicit settings objects.
