"""Error taxonomy shared by services, dependencies and the error handlers.

Services and dependencies raise these; only ``mesto.api.error_handlers`` turns
them into HTTP responses.
"""

from fastapi import status

INTERNAL_ERROR_MESSAGE = "An error occurred on the server"


class MestoError(Exception):
    """Base class for errors with a known HTTP status and a client-safe message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = INTERNAL_ERROR_MESSAGE

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequestError(MestoError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid data passed"


class UnauthorizedError(MestoError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authorization required"


class ForbiddenError(MestoError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Not enough permissions"


class NotFoundError(MestoError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class ConflictError(MestoError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource already exists"


class InvalidTokenError(Exception):
    """A bearer token failed verification (bad signature, expired, malformed)."""
