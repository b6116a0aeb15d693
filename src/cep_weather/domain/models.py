"""
cep_weather.domain.models

Request/response and provider payload models.

Responsibilities:
- `CepRequest`: gateway request body (exactly one string field, no extras).
- `LocationResult` / `WeatherSample`: request-local lookup results.
- `TemperatureReading`: the resolver's public response payload.
- Provider payload schemas used to decode ViaCEP and WeatherAPI responses.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from cep_weather.domain.conversion import celsius_to_fahrenheit, celsius_to_kelvin, round1


class CepRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    cep: StrictStr


@dataclass(frozen=True, slots=True)
class LocationResult:
    """
    Resolved locality, or `city=None` when the provider reports the CEP as unknown.
    """

    city: str | None

    @property
    def found(self) -> bool:
        return bool(self.city)


@dataclass(frozen=True, slots=True)
class WeatherSample:
    city: str
    temp_c: float


class TemperatureReading(BaseModel):
    city: str
    temp_C: float
    temp_F: float
    temp_K: float

    @classmethod
    def from_sample(cls, sample: WeatherSample) -> TemperatureReading:
        # All three scales derive from the same raw Celsius value.
        c = sample.temp_c
        return cls(
            city=sample.city,
            temp_C=round1(c),
            temp_F=round1(celsius_to_fahrenheit(c)),
            temp_K=round1(celsius_to_kelvin(c)),
        )


## Provider payloads


class ViaCepPayload(BaseModel):
    localidade: str | None = None
    # ViaCEP has returned both "true" and true for unknown CEPs.
    erro: bool | str | None = None

    def to_result(self) -> LocationResult:
        if self.erro is True or (isinstance(self.erro, str) and self.erro.lower() == "true"):
            return LocationResult(city=None)
        city = (self.localidade or "").strip()
        return LocationResult(city=city or None)


class _CurrentWeather(BaseModel):
    # Anything outside this range is not a surface temperature.
    temp_c: float = Field(allow_inf_nan=False, ge=-273, le=1000)


class WeatherApiPayload(BaseModel):
    current: _CurrentWeather


# --- Module Notes -----------------------------------------------------------
# Field names of `TemperatureReading` are part of the public wire format
# (`temp_C`, `temp_F`, `temp_K`) and must not be renamed.
