"""Submission-specific exceptions."""


class DroneLogError(Exception):
    """Base exception for all drone flight log errors."""


class ContractViolationError(DroneLogError):
    """Raised when a collaborator payload does not fit the expected contract."""

    def __init__(self, service: str, detail: str):
        self.service = service
        self.detail = detail
        super().__init__(f"{service} returned an unexpected payload: {detail}")


class SubmissionInProgressError(DroneLogError):
    """Raised when a session already has a submission in flight."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"session {session_id} already has a submission in flight")
