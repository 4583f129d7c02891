"""In-memory store of validation sessions."""

from uuid import UUID, uuid4

import structlog

from labpages_core.validation import ValidationSession

logger = structlog.get_logger()


class SessionStore:
    """Validation sessions keyed by id, held for the life of the process."""

    def __init__(self) -> None:
        self._sessions: dict[UUID, ValidationSession] = {}

    def create(self) -> tuple[UUID, ValidationSession]:
        session_id = uuid4()
        session = ValidationSession(
            on_progress=lambda complete: _log_progress(session_id, complete)
        )
        self._sessions[session_id] = session
        logger.info("validation_session_created", session_id=str(session_id))
        return session_id, session

    def get(self, session_id: UUID) -> ValidationSession | None:
        return self._sessions.get(session_id)


def _log_progress(session_id: UUID, complete: bool) -> None:
    if complete:
        logger.info("validation_session_complete", session_id=str(session_id))


_store: SessionStore | None = None


def get_store() -> SessionStore:
    """Get the process-wide session store."""
    global _store
    if _store is None:
        _store = SessionStore()
    return _store
