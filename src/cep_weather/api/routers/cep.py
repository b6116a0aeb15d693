"""
cep_weather.api.routers.cep

Gateway endpoint.

Responsibilities:
- Accept `POST /cep` with `{"cep": "<8 digits>"}` (no other fields).
- Delegate to `GatewayForwarder` and relay the resolver's answer verbatim.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError
from starlette.responses import Response

from cep_weather.api.deps import gateway_forwarder
from cep_weather.api.responses import failure_response, relay_response
from cep_weather.domain.models import CepRequest
from cep_weather.domain.results import Failure, FailureKind
from cep_weather.services.forwarding import GatewayForwarder

router = APIRouter(tags=["gateway"])


@router.post("/cep")
async def handle_cep(
    request: Request,
    forwarder: GatewayForwarder = Depends(gateway_forwarder),
) -> Response:
    # Parsed by hand: FastAPI's body validation would answer with a JSON 422 envelope.
    raw = await request.body()
    try:
        body = CepRequest.model_validate_json(raw)
    except ValidationError:
        return failure_response(FailureKind.INVALID_FORMAT)

    result = await forwarder.forward(
        cep=body.cep,
        request_id=getattr(request.state, "request_id", None),
    )
    if isinstance(result, Failure):
        return failure_response(result.kind)
    return relay_response(result.value)


# --- Module Notes -----------------------------------------------------------
# Only POST is routed; other verbs hit the app's 405 handler before any body is read.
