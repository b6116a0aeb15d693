"""
cep_weather.api.responses

Response helpers shared by both services.

Responsibilities:
- Map a `FailureKind` to its plain-text HTTP response.
- Rebuild a relayed resolver response on the gateway.
- Replace Starlette's JSON 405 body with the public plain-text message.
"""

from __future__ import annotations

from collections.abc import Mapping

from fastapi import Request
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import PlainTextResponse, Response
from starlette.status import HTTP_405_METHOD_NOT_ALLOWED

from cep_weather.domain.results import FailureKind
from cep_weather.services.forwarding import RelayedResponse


def failure_response(kind: FailureKind, *, headers: Mapping[str, str] | None = None) -> Response:
    return PlainTextResponse(kind.message, status_code=kind.status_code, headers=headers)


def relay_response(relayed: RelayedResponse) -> Response:
    response = Response(content=relayed.body, status_code=relayed.status_code)
    # append (not set) keeps repeated headers such as set-cookie intact.
    for name, value in relayed.headers:
        response.headers.append(name, value)
    return response


async def plain_http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code == HTTP_405_METHOD_NOT_ALLOWED:
        return failure_response(FailureKind.METHOD_NOT_ALLOWED, headers=exc.headers)
    return await http_exception_handler(request, exc)


# --- Module Notes -----------------------------------------------------------
# Error bodies are bare text (no JSON envelope); the gateway relays them unchanged.
