"""Per-operator orchestrators, keyed by session id."""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Callable

from dronelog.config import DEFAULT_MAX_SESSIONS
from dronelog.services.orchestrator import SubmissionOrchestrator

logger = logging.getLogger(__name__)

DEFAULT_SESSION_ID = "default"


class SessionRegistry:
    """Holds at most ``max_sessions`` orchestrators, least recently used first.

    Sessions are only stored by ``open()``. When the registry is full the
    least recently used session without a submission in flight is dropped.
    """

    def __init__(
        self,
        factory: Callable[[], SubmissionOrchestrator],
        max_sessions: int = DEFAULT_MAX_SESSIONS,
    ):
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self._factory = factory
        self._max_sessions = max_sessions
        self._sessions: OrderedDict[str, SubmissionOrchestrator] = OrderedDict()

    def find(self, session_id: str) -> SubmissionOrchestrator | None:
        orchestrator = self._sessions.get(session_id)
        if orchestrator is not None:
            self._sessions.move_to_end(session_id)
        return orchestrator

    def detached(self) -> SubmissionOrchestrator:
        """A fresh orchestrator that is not stored."""
        return self._factory()

    def open(self, session_id: str) -> SubmissionOrchestrator:
        orchestrator = self.find(session_id)
        if orchestrator is None:
            orchestrator = self._factory()
            self._sessions[session_id] = orchestrator
            logger.debug("Opened submission session %s", session_id)
            self._evict(keep=session_id)
        return orchestrator

    def _evict(self, keep: str) -> None:
        for session_id in list(self._sessions):
            if len(self._sessions) <= self._max_sessions:
                return
            if session_id == keep or self._sessions[session_id].is_submitting:
                continue
            del self._sessions[session_id]
            logger.debug("Evicted idle submission session %s", session_id)
        if len(self._sessions) > self._max_sessions:
            logger.warning(
                "%d sessions open, all busy; limit is %d",
                len(self._sessions),
                self._max_sessions,
            )

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions
