"""
Domain exceptions raised by PawMart services.
Each exception carries the HTTP status code the API layer reports for it.
"""


class PawMartError(Exception):
    """Base class for expected, user-facing service errors."""

    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(PawMartError):
    """The request cannot be fulfilled in the current state (empty cart, low stock)."""

    status_code = 400


class UnauthorizedError(PawMartError):
    """No caller identity was supplied."""

    status_code = 401


class ForbiddenError(PawMartError):
    """The caller is not allowed to act on the referenced row."""

    status_code = 403


class NotFoundError(PawMartError):
    """A referenced row does not exist."""

    status_code = 404


class ConflictError(PawMartError):
    """The operation conflicts with existing state."""

    status_code = 409
