"""Domain errors raised by the board services.

Every error carries a human-readable ``message`` and the HTTP status the API
layer answers with. Routes never build error responses themselves; the
handlers registered in :mod:`taskboard.main` turn these into
``{"error": message}`` bodies.
"""

from typing import Optional


class TaskBoardError(Exception):
    """Base class for all domain errors."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(TaskBoardError):
    """A required field is missing or malformed."""

    status_code = 400
    default_message = "Invalid request format"


class AuthError(TaskBoardError):
    """Missing, invalid or expired credential, or a wrong password."""

    status_code = 401
    default_message = "Authorization required"

    MISSING = "missing"
    INVALID = "invalid"

    def __init__(self, message: Optional[str] = None, reason: str = INVALID):
        super().__init__(message)
        self.reason = reason


class NotFoundError(TaskBoardError):
    """Entity absent, or owned by a board other than the authenticated one."""

    status_code = 404
    default_message = "Not found"


class PersistenceError(TaskBoardError):
    """Storage backend failure. The message never carries driver details."""

    status_code = 500
    default_message = "Internal server error"
