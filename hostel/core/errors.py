"""
Error taxonomy.

Every error carries the HTTP status it maps to. The API layer turns any
HostelError into a `{"success": false, "message": ...}` body.
"""

from __future__ import annotations


class HostelError(Exception):
    """Base exception for all application errors."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(HostelError):
    """Missing or unusable input."""

    status_code = 400
    default_message = "All fields are required"


class AuthError(HostelError):
    """Credentials were rejected."""

    status_code = 401
    default_message = "Invalid credentials"


class NotAuthenticatedError(AuthError):
    """No session on a protected route."""

    default_message = "Not authenticated"


class ForbiddenError(AuthError):
    """Authenticated, but the session role may not do this."""

    status_code = 403
    default_message = "Permission denied"


class PageRedirect(HostelError):
    """A page request that must bounce to the login page."""

    status_code = 302
    default_message = "Redirecting to login"


class NotFoundError(HostelError):
    """No record with the requested id."""

    status_code = 404
    default_message = "Not found"


class PersistenceError(HostelError):
    """A collection file could not be read or written."""

    status_code = 500


class RecordParseError(PersistenceError):
    """A collection file does not hold a JSON array."""
    pass


class SessionError(HostelError):
    """The session store failed."""

    status_code = 500
    default_message = "Error logging out"
