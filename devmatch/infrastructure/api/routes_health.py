"""Health check endpoint."""

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Liveness probe; the engine holds no connections to check."""
    return {
        "status": "ok",
        "service": "DevMatch - developer/ticket matching engine",
    }
