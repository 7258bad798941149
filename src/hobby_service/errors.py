"""Error taxonomy shared by services and routers.

Every error carries the HTTP status it is rendered with, so routers never
translate exceptions by hand. Anything that is not a ``HobbyServiceError``
is treated as an unexpected failure by the application's catch-all handler.
"""


class HobbyServiceError(Exception):
    """Base class for errors reported to API callers."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(HobbyServiceError):
    """Referenced hobby, post or user does not exist."""

    status_code = 404


class ValidationError(HobbyServiceError):
    """Input violates a length or required-field rule."""

    status_code = 400


class UnauthorizedError(HobbyServiceError):
    """No viewer identity could be resolved."""

    status_code = 401


class ForbiddenError(HobbyServiceError):
    """Viewer lacks the role required for the operation."""

    status_code = 403


class ConstraintViolationError(HobbyServiceError):
    """The store rejected a write because of a relational rule."""

    status_code = 400

    def __init__(self, message: str, reason: str | None = None):
        super().__init__(f"{message}: {reason}" if reason else message)
        self.reason = reason
