from fastapi import APIRouter, HTTPException

from labpages_core.content import load_default_catalog

from app.settings import settings

router = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@router.get("/health/ready")
async def readiness_check() -> dict[str, str]:
    """Readiness check - verifies quiz data and step content are available."""
    load_default_catalog()
    if not settings.steps_dir.is_dir():
        raise HTTPException(status_code=503, detail="Steps directory not found")
    return {"status": "ready"}
