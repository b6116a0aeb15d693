"""
cep_weather.observability.tracing

OpenTelemetry tracing setup and cross-service context propagation.

Responsibilities:
- Build the process-wide `TracerProvider` (service resource, batched OTLP export).
- Install the W3C trace-context propagator.
- Inject the active trace context into every outbound httpx request.
- Build the shared httpx client used by each service.
"""

from __future__ import annotations

import httpx
from opentelemetry import propagate, trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, SpanExporter
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator

from cep_weather.observability.logging import get_logger
from cep_weather.settings import ServiceSettings

log = get_logger(__name__)

_TRACES_PATH = "/v1/traces"


def otlp_traces_endpoint(base: str) -> str:
    base = base.rstrip("/")
    if base.endswith(_TRACES_PATH):
        return base
    return f"{base}{_TRACES_PATH}"


def configure_tracing(
    settings: ServiceSettings, *, exporter: SpanExporter | None = None
) -> TracerProvider:
    """
    Install a global tracer provider exporting spans in background batches.

    The batch processor runs on its own thread: an unreachable collector only
    produces SDK log lines, never a failed request.
    """

    resource = Resource.create({SERVICE_NAME: settings.service_name})
    provider = TracerProvider(resource=resource)
    if exporter is None:
        exporter = OTLPSpanExporter(endpoint=otlp_traces_endpoint(settings.otel_exporter_otlp_endpoint))
    provider.add_span_processor(BatchSpanProcessor(exporter))

    trace.set_tracer_provider(provider)
    propagate.set_global_textmap(TraceContextTextMapPropagator())

    log.info(
        "tracing_configured",
        otlp_endpoint=settings.otel_exporter_otlp_endpoint,
        service_name=settings.service_name,
    )
    return provider


def get_tracer(name: str) -> trace.Tracer:
    # Resolved lazily through the global provider so tests can swap it.
    return trace.get_tracer(name)


async def inject_trace_headers(request: httpx.Request) -> None:
    # httpx request hook: runs in the caller's task, so the current span is the parent.
    propagate.inject(request.headers)


def build_http_client(
    *,
    timeout_seconds: float,
    base_url: str = "",
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=timeout_seconds,
        transport=transport,
        event_hooks={"request": [inject_trace_headers]},
    )


# --- Module Notes -----------------------------------------------------------
# Swapping the backend (Jaeger, Zipkin, vendor agent) only touches `configure_tracing`;
# swapping the wire format only touches the global textmap propagator.
