"""Endpoints de health check (liveness e readiness)."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service="citygen",
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe — pronto quando os comandos foram registrados."""
    state = request.app.state
    commands_registered = int(getattr(state, "commands_registered", 0) or 0)
    signing_ready = getattr(state, "verify_key", None) is not None
    ready = commands_registered > 0 and signing_ready

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "commands_registered": commands_registered,
            "verify_key_loaded": signing_ready,
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)
