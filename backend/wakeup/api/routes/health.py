"""Health check."""

from fastapi import APIRouter

from wakeup import __version__
from wakeup.schemas.wake import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(version=__version__)


@router.get("/ping")
async def ping():
    """Ultra-lightweight ping."""
    return {"status": "ok"}
