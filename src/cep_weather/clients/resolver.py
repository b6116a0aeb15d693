"""
cep_weather.clients.resolver

Gateway-side client for the resolver service.

Responsibilities:
- Call `GET /weather?cep=...` on the resolver base URL.
- Forward the caller's request id so both services log under the same id.
- Return the raw response untouched; the gateway relays it verbatim.
"""

from __future__ import annotations

import httpx

from cep_weather.domain.results import UpstreamError


class ResolverClient:
    def __init__(self, *, http: httpx.AsyncClient) -> None:
        # `http` carries the resolver base URL.
        self._http = http

    async def weather(self, *, cep: str, request_id: str | None = None) -> httpx.Response:
        headers = {"x-request-id": request_id} if request_id else None
        try:
            return await self._http.get("/weather", params={"cep": cep}, headers=headers)
        except httpx.HTTPError as e:
            raise UpstreamError(f"resolver request failed: {e!r}") from e


# --- Module Notes -----------------------------------------------------------
# Any HTTP status is a successful call here; only transport faults raise.
