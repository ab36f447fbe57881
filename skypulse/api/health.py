"""Liveness endpoint for the SkyPulse backend."""

from fastapi import APIRouter
from skypulse.config import settings

router = APIRouter()


@router.get("/healthz", summary="Health check")
def health_check() -> dict[str, str]:
    """Report that the weather backend is up and which environment it runs in."""
    return {"status": "ok", "env": settings.skypulse_env}
