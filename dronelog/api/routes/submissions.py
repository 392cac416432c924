"""Flight submission endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from dronelog.api.deps import (
    get_orchestrator,
    get_session_id,
    open_orchestrator,
)
from dronelog.contracts.enums import ViewState
from dronelog.contracts.submission import SubmissionForm
from dronelog.errors import SubmissionInProgressError
from dronelog.services.orchestrator import SubmissionOrchestrator
from dronelog.services.views import summarize

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/submissions", tags=["submissions"])


def _snapshot(orchestrator: SubmissionOrchestrator) -> dict:
    state = orchestrator.state
    data = state.model_dump(mode="json", by_alias=True)
    data["summary"] = (
        summarize(state).as_dict() if state.view != ViewState.FORM else None
    )
    return data


@router.post("")
async def submit_flight(
    form: SubmissionForm,
    session_id: str = Depends(get_session_id),
    orchestrator: SubmissionOrchestrator = Depends(open_orchestrator),
) -> dict:
    """Verify the license, log the flight and return the resulting state.

    The session is keyed by the ``X-Session-Id`` header and is created here
    on first use. Requests without the header share the ``"default"``
    session, so its state is visible to every headerless client.
    """
    if orchestrator.is_submitting:
        exc = SubmissionInProgressError(session_id)
        raise HTTPException(status_code=409, detail=str(exc)) from exc

    await orchestrator.submit(form.license, form.start_time, form.end_time, form.coords)
    return _snapshot(orchestrator)


@router.get("/current")
async def get_current(
    orchestrator: SubmissionOrchestrator = Depends(get_orchestrator),
) -> dict:
    """Current state; an unknown session reads as a fresh form."""
    return _snapshot(orchestrator)


@router.post("/reset")
async def reset_submission(
    orchestrator: SubmissionOrchestrator = Depends(get_orchestrator),
) -> dict:
    """Back to the form; clears any stored result."""
    orchestrator.reset()
    return _snapshot(orchestrator)


@router.delete("/error")
async def dismiss_error(
    orchestrator: SubmissionOrchestrator = Depends(get_orchestrator),
) -> dict:
    orchestrator.clear_error()
    return _snapshot(orchestrator)
