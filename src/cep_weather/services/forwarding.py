"""
cep_weather.services.forwarding

Gateway forwarding to the resolver service.

Responsibilities:
- Re-check the CEP so malformed input never costs a network hop.
- Call the resolver inside a `forward to resolver` span, under the request deadline.
- Capture the resolver's status, headers and body for a verbatim relay.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

import httpx
from opentelemetry.trace import SpanKind, Status, StatusCode

from cep_weather.clients.resolver import ResolverClient
from cep_weather.domain.results import Failure, FailureKind, Success, UpstreamError
from cep_weather.domain.validation import is_valid_cep
from cep_weather.observability.logging import get_logger
from cep_weather.observability.tracing import get_tracer
from cep_weather.settings import GatewaySettings

log = get_logger(__name__)

# Connection-level headers plus the ones describing framing httpx already undid
# (decompressed body, recomputed length). The local server sets its own date/server.
_NOT_RELAYED = frozenset(
    {
        "connection",
        "keep-alive",
        "proxy-authenticate",
        "proxy-authorization",
        "te",
        "trailer",
        "transfer-encoding",
        "upgrade",
        "content-length",
        "content-encoding",
        "date",
        "server",
    }
)


@dataclass(frozen=True, slots=True)
class RelayedResponse:
    status_code: int
    headers: tuple[tuple[str, str], ...]
    body: bytes

    @classmethod
    def from_httpx(cls, r: httpx.Response) -> RelayedResponse:
        headers = tuple((k, v) for k, v in r.headers.multi_items() if k.lower() not in _NOT_RELAYED)
        return cls(status_code=r.status_code, headers=headers, body=r.content)


ForwardResult = Success[RelayedResponse] | Failure


class GatewayForwarder:
    def __init__(self, *, settings: GatewaySettings, http: httpx.AsyncClient) -> None:
        self._settings = settings
        self._resolver = ResolverClient(http=http)

    async def forward(self, *, cep: str, request_id: str | None = None) -> ForwardResult:
        if not is_valid_cep(cep):
            return Failure(FailureKind.INVALID_FORMAT)

        tracer = get_tracer(__name__)
        with tracer.start_as_current_span("forward to resolver", kind=SpanKind.CLIENT) as span:
            span.set_attribute("cep", cep)
            try:
                async with asyncio.timeout(self._settings.request_timeout_seconds):
                    r = await self._resolver.weather(cep=cep, request_id=request_id)
            except UpstreamError as e:
                span.set_status(Status(StatusCode.ERROR, str(e)))
                log.warning("resolver_unreachable", error=str(e))
                return Failure(FailureKind.UPSTREAM_FAILURE, detail=str(e))
            except TimeoutError:
                span.set_status(Status(StatusCode.ERROR, "request deadline exceeded"))
                log.warning("resolver_deadline_exceeded", timeout=self._settings.request_timeout_seconds)
                return Failure(FailureKind.UPSTREAM_FAILURE, detail="request deadline exceeded")

            span.set_attribute("http.response.status_code", r.status_code)

        log.info("resolver_responded", status_code=r.status_code)
        return Success(RelayedResponse.from_httpx(r))


# --- Module Notes -----------------------------------------------------------
# Resolver-originated errors (404, 422, 500, 502) are successes at this layer: the
# gateway relays them without looking at the body.
