"""
Liveness endpoint.

Routes: GET /health

Dependencies: fastapi, pydantic
System role: Process liveness probe (no database or provider calls)
"""

from fastapi import APIRouter
from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report that the API process is serving requests."""
    return HealthResponse(status="healthy", message="Server Healthy")
