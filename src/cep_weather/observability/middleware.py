"""
cep_weather.observability.middleware

HTTP middleware for request-scoped tracing and logging context.

Responsibilities:
- Continue the caller's trace (or start a new one) with a SERVER span per request.
- Name the span after the endpoint that handled the request.
- Generate/propagate request IDs and bind request metadata into structlog contextvars.
"""

from __future__ import annotations

import uuid

import structlog
from opentelemetry import propagate
from opentelemetry.trace import SpanKind, Status, StatusCode
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from cep_weather.observability.tracing import get_tracer


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    - Extracts the remote trace context from inbound headers
    - Wraps the request in a SERVER span that is closed on every exit path
    - Ensures every request has a request id bound for structured logs
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id
        parent = propagate.extract(dict(request.headers))
        tracer = get_tracer(__name__)

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=request.url.path,
            method=request.method,
        )
        try:
            with tracer.start_as_current_span(
                f"{request.method} {request.url.path}",
                context=parent,
                kind=SpanKind.SERVER,
                attributes={
                    "http.request.method": request.method,
                    "url.path": request.url.path,
                    "request.id": request_id,
                },
            ) as span:
                response: Response = await call_next(request)

                # The router stores the matched endpoint in the shared scope.
                endpoint = request.scope.get("endpoint")
                if endpoint is not None:
                    span.update_name(endpoint.__name__)
                span.set_attribute("http.response.status_code", response.status_code)
                if response.status_code >= 500:
                    span.set_status(Status(StatusCode.ERROR))
        finally:
            # Avoid leaking context across requests under async concurrency.
            structlog.contextvars.clear_contextvars()

        response.headers["x-request-id"] = request_id
        return response


# --- Module Notes -----------------------------------------------------------
# This middleware complements `observability.logging.configure_logging`: the trace ids
# it activates are stamped onto every log line by `logging.add_trace_ids`.
