"""
cep_weather.api.routers.weather

Resolver endpoint.

Responsibilities:
- Serve `GET /weather?cep=<8 digits>`.
- Render the pipeline result: JSON reading on success, plain-text failure otherwise.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse, Response

from cep_weather.api.deps import weather_pipeline
from cep_weather.api.responses import failure_response
from cep_weather.domain.results import Failure
from cep_weather.services.weather_pipeline import WeatherPipeline

router = APIRouter(tags=["resolver"])


@router.get("/weather")
async def handle_weather(
    cep: str = "",
    pipeline: WeatherPipeline = Depends(weather_pipeline),
) -> Response:
    result = await pipeline.run(cep=cep)
    if isinstance(result, Failure):
        return failure_response(result.kind)
    return JSONResponse(result.value.model_dump())


# --- Module Notes -----------------------------------------------------------
# A missing `cep` query parameter defaults to "" so it fails validation as 422 like any
# other malformed code, instead of FastAPI's own validation error body.
