"""
Domain error taxonomy.

Services raise these instead of HTTP exceptions so the lifecycle rules stay
independent of the transport. ``app.main`` renders each one as
``{"success": false, "error": <kind>, "message": <message>}`` with the
class's HTTP status.
"""

from fastapi import status


class SwapSkillzError(Exception):
    """Base class for errors surfaced to API callers."""

    kind = "error"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(SwapSkillzError):
    kind = "not_found"
    status_code = status.HTTP_404_NOT_FOUND


class ForbiddenError(SwapSkillzError):
    kind = "forbidden"
    status_code = status.HTTP_403_FORBIDDEN


class InvalidStateError(SwapSkillzError):
    """Transition not legal from the record's current status."""

    kind = "invalid_state"
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidOperationError(SwapSkillzError):
    """Malformed request, e.g. a user targeting themselves."""

    kind = "invalid_operation"
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(SwapSkillzError):
    kind = "conflict"
    status_code = status.HTTP_400_BAD_REQUEST
