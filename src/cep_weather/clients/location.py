"""
cep_weather.clients.location

ViaCEP client: resolves a CEP into a locality name.

Responsibilities:
- Call `GET /ws/{cep}/json/` on the configured ViaCEP base URL.
- Distinguish "unknown CEP" (a valid answer) from provider failures.
"""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from cep_weather.domain.models import LocationResult, ViaCepPayload
from cep_weather.domain.results import UpstreamError


class LocationClient:
    def __init__(self, *, http: httpx.AsyncClient, base_url: str) -> None:
        self._http = http
        self._base_url = base_url.rstrip("/")

    def url_for(self, cep: str) -> str:
        return f"{self._base_url}/ws/{cep}/json/"

    async def lookup(self, *, cep: str) -> LocationResult:
        try:
            r = await self._http.get(self.url_for(cep))
        except httpx.HTTPError as e:
            raise UpstreamError(f"viacep request failed: {e!r}") from e

        if r.status_code != httpx.codes.OK:
            raise UpstreamError(f"viacep status {r.status_code}", status_code=r.status_code)

        try:
            payload = ViaCepPayload.model_validate_json(r.content)
        except ValidationError as e:
            raise UpstreamError("viacep returned an undecodable body", status_code=r.status_code) from e
        return payload.to_result()


# --- Module Notes -----------------------------------------------------------
# `LocationResult(city=None)` is a successful lookup of an unknown CEP; only transport,
# status and decode problems raise.
