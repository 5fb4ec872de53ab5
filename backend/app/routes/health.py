"""
Todo API — Health Check Routes
===============================

What:  Liveness endpoints for load balancers and container health checks.
How:   Fixed responses; no store access and no business logic.

    GET /        plain-text greeting
    GET /health  `{status: "success", message}` envelope
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.schemas.todo import HealthResponse

router = APIRouter(tags=["Health"])

HEALTH_MESSAGE = "Simple CRUD API with FastAPI, SQLAlchemy, Postgres"


@router.get("/", response_class=PlainTextResponse, summary="Root greeting")
async def root() -> str:
    return "Hello, World!"


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service liveness probe",
)
async def health_check() -> HealthResponse:
    """Always succeeds while the process can serve requests."""
    return HealthResponse(message=HEALTH_MESSAGE)
