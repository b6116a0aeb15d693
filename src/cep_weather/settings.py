"""
cep_weather.settings

Central configuration models (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for the gateway and resolver.
- Honour the standard OpenTelemetry env vars (endpoint, service name).
- Hide secrets from repr/logging (the weather API key).
- Offer cached settings instances for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServiceSettings(BaseSettings):
    """
    Settings shared by both services.
    Read once at startup; handlers only ever see this object read-only.
    """

    model_config = SettingsConfigDict(
        env_prefix="CEP_",
        case_sensitive=False,
        populate_by_name=True,
        frozen=True,
    )

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = Field(
        default="cep-weather",
        validation_alias=AliasChoices("OTEL_SERVICE_NAME", "service_name"),
    )
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Tracing
    otel_exporter_otlp_endpoint: str = Field(
        default="http://localhost:4318",
        validation_alias=AliasChoices("OTEL_EXPORTER_OTLP_ENDPOINT", "otel_exporter_otlp_endpoint"),
    )

    # Deadline shared by every downstream call of a single request.
    request_timeout_seconds: float = Field(default=10.0, gt=0)


class GatewaySettings(ServiceSettings):
    service_name: str = Field(
        default="gateway",
        validation_alias=AliasChoices("OTEL_SERVICE_NAME", "service_name"),
    )
    api_port: int = 8081

    resolver_base_url: str = Field(
        default="http://localhost:8080",
        validation_alias=AliasChoices("SERVICE_B_URL", "RESOLVER_BASE_URL", "resolver_base_url"),
    )


class ResolverSettings(ServiceSettings):
    service_name: str = Field(
        default="resolver",
        validation_alias=AliasChoices("OTEL_SERVICE_NAME", "service_name"),
    )
    api_port: int = 8080

    weather_api_key: str | None = Field(
        default=None,
        repr=False,
        validation_alias=AliasChoices("WEATHER_API_KEY", "weather_api_key"),
    )
    viacep_base_url: str = "https://viacep.com.br"
    weather_api_base_url: str = "https://api.weatherapi.com"

    @property
    def has_weather_api_key(self) -> bool:
        return bool(self.weather_api_key and self.weather_api_key.strip())


@lru_cache(maxsize=1)
def get_gateway_settings() -> GatewaySettings:
    return GatewaySettings()


@lru_cache(maxsize=1)
def get_resolver_settings() -> ResolverSettings:
    return ResolverSettings()


# --- Module Notes -----------------------------------------------------------
# Env var names mirror the deployment manifests: OTEL_* for tracing, SERVICE_B_URL for
# the gateway's downstream and WEATHER_API_KEY for the resolver's credential.
