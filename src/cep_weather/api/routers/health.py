"""
cep_weather.api.routers.health

Health endpoint.

Responsibilities:
- Provide the liveness check (`/healthz`).
"""

from __future__ import annotations

from fastapi import APIRouter

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    # Liveness only: downstream providers are not contacted.
    return {"status": "ok"}


# --- Module Notes -----------------------------------------------------------
# Kubernetes typically uses /healthz for liveness.
