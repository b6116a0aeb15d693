"""
cep_weather.services.weather_pipeline

Resolver pipeline: CEP -> locality -> current temperature in three scales.

Responsibilities:
- Re-validate the CEP before any network call.
- Run the location lookup and the weather lookup, each inside its own span.
- Bound the whole pipeline by one request deadline.
- Report the outcome as `Success(TemperatureReading)` or a typed `Failure`.
"""

from __future__ import annotations

import asyncio

import httpx
from opentelemetry.trace import Span, SpanKind, Status, StatusCode

from cep_weather.clients.location import LocationClient
from cep_weather.clients.weather import WeatherClient
from cep_weather.domain.models import TemperatureReading
from cep_weather.domain.results import Failure, FailureKind, Success, UpstreamError
from cep_weather.domain.validation import is_valid_cep
from cep_weather.observability.logging import get_logger
from cep_weather.observability.tracing import get_tracer
from cep_weather.settings import ResolverSettings

log = get_logger(__name__)

PipelineResult = Success[TemperatureReading] | Failure


class WeatherPipeline:
    """
    Linear pipeline; each step either hands over to the next or terminates
    with a result. Nothing is retried.
    """

    def __init__(self, *, settings: ResolverSettings, http: httpx.AsyncClient) -> None:
        self._settings = settings
        self._http = http
        self._location = LocationClient(http=http, base_url=settings.viacep_base_url)

    async def run(self, *, cep: str) -> PipelineResult:
        if not is_valid_cep(cep):
            log.info("invalid_cep")
            return Failure(FailureKind.INVALID_FORMAT)

        try:
            async with asyncio.timeout(self._settings.request_timeout_seconds):
                return await self._resolve(cep)
        except TimeoutError:
            log.warning("pipeline_deadline_exceeded", cep=cep, timeout=self._settings.request_timeout_seconds)
            return Failure(FailureKind.UPSTREAM_FAILURE, detail="request deadline exceeded")

    async def _resolve(self, cep: str) -> PipelineResult:
        tracer = get_tracer(__name__)

        with tracer.start_as_current_span("location lookup", kind=SpanKind.CLIENT) as span:
            span.set_attribute("cep", cep)
            try:
                location = await self._location.lookup(cep=cep)
            except UpstreamError as e:
                return _upstream_failure(span, step="location", error=e)

            if not location.found:
                span.set_attribute("location.found", False)
                log.info("cep_not_found", cep=cep)
                return Failure(FailureKind.NOT_FOUND)
            span.set_attribute("location.found", True)
            span.set_attribute("location.city", location.city)

        # Checked after the location lookup so unknown CEPs still answer 404.
        if not self._settings.has_weather_api_key:
            log.error("weather_api_key_missing")
            return Failure(FailureKind.MISCONFIGURED_DEPENDENCY)

        weather = WeatherClient(
            http=self._http,
            base_url=self._settings.weather_api_base_url,
            api_key=self._settings.weather_api_key or "",
        )
        with tracer.start_as_current_span("weather lookup", kind=SpanKind.CLIENT) as span:
            span.set_attribute("location.city", location.city)
            try:
                sample = await weather.current(city=location.city)
            except UpstreamError as e:
                return _upstream_failure(span, step="weather", error=e)
            span.set_attribute("weather.temp_c", sample.temp_c)

        reading = TemperatureReading.from_sample(sample)
        log.info("temperature_resolved", cep=cep, city=reading.city, temp_c=reading.temp_C)
        return Success(reading)


def _upstream_failure(span: Span, *, step: str, error: UpstreamError) -> Failure:
    span.set_status(Status(StatusCode.ERROR, str(error)))
    if error.status_code is not None:
        span.set_attribute("http.response.status_code", error.status_code)
    log.warning("upstream_failure", step=step, error=str(error), status_code=error.status_code)
    return Failure(FailureKind.UPSTREAM_FAILURE, detail=str(error))


# --- Module Notes -----------------------------------------------------------
# Client disconnects cancel the request task; the cancellation reaches whichever
# lookup is in flight and the span context managers still close their spans.
