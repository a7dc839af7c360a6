"""
Policies - the session gate for routes.

Use in route handlers:

    identity: SessionIdentity = Depends(require_session)
    identity: SessionIdentity = Depends(require_role(Role.WARDEN, "Only wardens can ..."))

Design:
- The cookie is resolved to a SessionIdentity through the SessionManager
  on `app.state`.
- No session raises NotAuthenticatedError; the app turns that into a 401
  for API calls and a redirect to the login page for page requests.
- The role gate lives here once instead of in every handler.
"""

from __future__ import annotations

from typing import Callable

from fastapi import Depends, Request

from hostel.auth.context import SessionIdentity
from hostel.auth.sessions import SessionManager
from hostel.core.errors import ForbiddenError, NotAuthenticatedError, PageRedirect
from hostel.core.models import Role
from hostel.integrations.sentry import set_user


# =============================================================================
# Session resolution
# =============================================================================


def get_session_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager


def get_session_token(request: Request) -> str | None:
    """Raw session cookie value, if the browser sent one."""
    return request.cookies.get(request.app.state.settings.session_cookie_name)


async def get_session_identity(
    request: Request,
    sessions: SessionManager = Depends(get_session_manager),
) -> SessionIdentity | None:
    """Resolve the session cookie. Never fails; anonymous is None."""
    return await sessions.resolve(get_session_token(request))


# =============================================================================
# Gates
# =============================================================================


async def require_session(
    identity: SessionIdentity | None = Depends(get_session_identity),
) -> SessionIdentity:
    """Require a logged-in user of any role."""
    if identity is None:
        raise NotAuthenticatedError()
    set_user(identity.id, role=identity.role.value)
    return identity


def require_role(role: Role, message: str | None = None) -> Callable:
    """
    Require a logged-in user with `role`.

    A session with another role gets a 403 carrying `message`.
    """

    async def dependency(
        identity: SessionIdentity = Depends(require_session),
    ) -> SessionIdentity:
        if identity.role != role:
            raise ForbiddenError(message or f"Only {role.value}s can do this")
        return identity

    return dependency


def require_page_role(role: Role) -> Callable:
    """
    Gate for role-specific pages.

    Anonymous visitors and sessions with another role are sent back to
    the login page.
    """

    async def dependency(
        identity: SessionIdentity = Depends(require_session),
    ) -> SessionIdentity:
        if identity.role != role:
            raise PageRedirect()
        return identity

    return dependency
