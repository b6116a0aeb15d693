"""
tests.helpers

Plain helpers shared by the test modules (stub handlers and in-process clients).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
from fastapi import FastAPI

VIACEP_URL = "http://viacep.test"
WEATHER_URL = "http://weather.test"
RESOLVER_URL = "http://resolver.test"

Handler = Callable[[httpx.Request], Any]


def json_handler(status: int, body: Any) -> Handler:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, json=body)

    return handler


def raising_handler(exc_type: type[httpx.TransportError]) -> Handler:
    def handler(request: httpx.Request) -> httpx.Response:
        raise exc_type("stubbed transport failure", request=request)

    return handler


def client_for(app: FastAPI) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")


# --- Module Notes -----------------------------------------------------------
# Kept out of conftest.py so test modules import them as `tests.helpers` under any
# pytest import mode.
