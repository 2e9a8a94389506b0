"""Health check endpoints."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel

import config

router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str


class ReadinessResponse(BaseModel):
    status: str
    task: Optional[Dict[str, Any]] = None


@router.get("/", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic liveness."""
    return HealthResponse(status="healthy", service="planbot", version=config.VERSION)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(request: Request) -> ReadinessResponse:
    """Readiness: container is built; reports the active task if any."""
    container = getattr(request.app.state, "container", None)
    if container is None:
        return ReadinessResponse(status="not_ready")
    task = container.state.task
    return ReadinessResponse(status="ready", task=task.to_dict() if task.is_set else None)


@router.get("/live")
async def liveness_check() -> dict:
    """Liveness endpoint."""
    return {"status": "alive"}
