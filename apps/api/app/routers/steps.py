"""Step content routes."""

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from labpages_core.errors import ContentNotFoundError, ContentPathError
from labpages_core.schemas import RenderedFragments

from app.routers.render import render_or_422
from app.services.content import read_step

router = APIRouter()


def _read_or_http_error(file: str) -> str:
    try:
        return read_step(file)
    except ContentPathError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ContentNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.get("/steps", response_class=PlainTextResponse)
async def get_step(file: str) -> PlainTextResponse:
    """Get a step's raw markdown."""
    return PlainTextResponse(
        _read_or_http_error(file),
        headers={"Cache-Control": "public, max-age=3600"},
    )


@router.get("/steps/rendered", response_model=RenderedFragments)
async def get_rendered_step(file: str) -> RenderedFragments:
    """Get a step rendered into the fragments around its widget."""
    return render_or_422(_read_or_http_error(file))
