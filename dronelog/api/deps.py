"""FastAPI dependency injection wiring."""

from __future__ import annotations

from fastapi import Depends, Header, Request

from dronelog.services.orchestrator import SubmissionOrchestrator
from dronelog.services.sessions import DEFAULT_SESSION_ID, SessionRegistry


def get_session_id(
    x_session_id: str | None = Header(None, alias="X-Session-Id"),
) -> str:
    """Session key for the operator.

    Requests without the header all share the ``"default"`` session, so
    clients serving more than one operator must send it.
    """
    return (x_session_id or "").strip() or DEFAULT_SESSION_ID


# ------------------------------------------------------------------
# Session registry (singleton from app.state)
# ------------------------------------------------------------------


def get_session_registry(request: Request) -> SessionRegistry:
    return request.app.state.sessions


def get_orchestrator(
    session_id: str = Depends(get_session_id),
    registry: SessionRegistry = Depends(get_session_registry),
) -> SubmissionOrchestrator:
    """Existing session, or a fresh unstored one for an unknown id."""
    return registry.find(session_id) or registry.detached()


def open_orchestrator(
    session_id: str = Depends(get_session_id),
    registry: SessionRegistry = Depends(get_session_registry),
) -> SubmissionOrchestrator:
    """Existing session, creating and storing it if needed."""
    return registry.open(session_id)
