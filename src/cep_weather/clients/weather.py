"""
cep_weather.clients.weather

WeatherAPI client: current temperature for a locality.

Responsibilities:
- Call `GET /v1/current.json` with the API key and the locality as `q`.
- Decode `current.temp_c` into a `WeatherSample`.
"""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from cep_weather.domain.models import WeatherApiPayload, WeatherSample
from cep_weather.domain.results import UpstreamError


class WeatherClient:
    def __init__(self, *, http: httpx.AsyncClient, base_url: str, api_key: str) -> None:
        self._http = http
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key

    async def current(self, *, city: str) -> WeatherSample:
        try:
            r = await self._http.get(
                f"{self._base_url}/v1/current.json",
                params={"key": self._api_key, "q": city, "aqi": "no"},
            )
        except httpx.HTTPError as e:
            # The exception text may embed the request URL (and therefore the key).
            raise UpstreamError(f"weather request failed: {type(e).__name__}") from e

        if r.status_code != httpx.codes.OK:
            raise UpstreamError(f"weather status {r.status_code}", status_code=r.status_code)

        try:
            payload = WeatherApiPayload.model_validate_json(r.content)
        except ValidationError as e:
            raise UpstreamError("weather returned an undecodable body", status_code=r.status_code) from e
        return WeatherSample(city=city, temp_c=payload.current.temp_c)


# --- Module Notes -----------------------------------------------------------
# A response without `current.temp_c` is a decode failure, not a 0 degree reading.
