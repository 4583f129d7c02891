"""Lesson rendering routes."""

import structlog
from fastapi import APIRouter, HTTPException

from labpages_core.errors import PlaceholderConflictError
from labpages_core.render import render_document
from labpages_core.schemas import RenderedFragments

from app.schemas.api import RenderRequest
from app.settings import settings

router = APIRouter()
logger = structlog.get_logger()


def render_or_422(markdown: str, strict: bool | None = None) -> RenderedFragments:
    """Render markdown, mapping placeholder conflicts to a 422."""
    if strict is None:
        strict = settings.strict_placeholders
    try:
        return render_document(markdown, strict=strict)
    except PlaceholderConflictError as exc:
        logger.info("placeholder_conflict", markers=exc.markers)
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.post("/render", response_model=RenderedFragments)
async def render(payload: RenderRequest) -> RenderedFragments:
    """Render lesson markdown into the fragments around its widget."""
    return render_or_422(payload.markdown, payload.strict)
