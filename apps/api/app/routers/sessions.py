"""Validation session routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from labpages_core.errors import UnknownEndpointError
from labpages_core.schemas import ValidationVerdict
from labpages_core.validation import ValidationSession

from app.schemas.api import SessionResponse, ValidateRequest
from app.services.sessions import SessionStore, get_store

router = APIRouter()


def _session_response(session_id: UUID, session: ValidationSession) -> SessionResponse:
    return SessionResponse(
        id=session_id,
        progress={endpoint.value: status for endpoint, status in session.progress().items()},
        completed_count=session.completed_count,
        is_complete=session.is_complete,
    )


def _get_session_or_404(store: SessionStore, session_id: UUID) -> ValidationSession:
    session = store.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


@router.post("/sessions", response_model=SessionResponse, status_code=201)
async def create_session(store: SessionStore = Depends(get_store)) -> SessionResponse:
    """Start tracking validation progress for a learner."""
    session_id, session = store.create()
    return _session_response(session_id, session)


@router.get("/sessions/{session_id}", response_model=SessionResponse)
async def get_session(
    session_id: UUID,
    store: SessionStore = Depends(get_store),
) -> SessionResponse:
    """Get the status of every endpoint in a session."""
    return _session_response(session_id, _get_session_or_404(store, session_id))


@router.post("/sessions/{session_id}/validate", response_model=ValidationVerdict)
async def validate_in_session(
    session_id: UUID,
    payload: ValidateRequest,
    store: SessionStore = Depends(get_store),
) -> ValidationVerdict:
    """Validate a response and record the verdict in the session."""
    session = _get_session_or_404(store, session_id)
    try:
        return session.validate(payload.endpoint, payload.raw_json_text)
    except UnknownEndpointError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.delete("/sessions/{session_id}", response_model=SessionResponse)
async def reset_session(
    session_id: UUID,
    store: SessionStore = Depends(get_store),
) -> SessionResponse:
    """Forget every verdict recorded in a session."""
    session = _get_session_or_404(store, session_id)
    session.reset()
    return _session_response(session_id, session)
