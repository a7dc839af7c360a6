# =============================================================================
# Server-side Sessions
# =============================================================================
#
# The session identity lives in a SessionStore keyed by a random session id.
# The browser only holds a cookie: an HS256 JWT carrying that id and an
# expiry, so a forged or stale cookie is rejected before the store is hit.
#
# =============================================================================

from __future__ import annotations

import logging
import secrets
from datetime import timedelta

import jwt

from hostel.auth.context import SessionIdentity
from hostel.core.utils import utc_now
from hostel.storage.base import SessionStore

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
TOKEN_TYPE = "session"


class SessionManager:
    """Create, resolve and destroy sessions."""

    def __init__(
        self,
        store: SessionStore,
        secret_key: str,
        ttl: timedelta = timedelta(hours=24),
    ):
        self.store = store
        self.secret_key = secret_key
        self.ttl = ttl

    @property
    def ttl_seconds(self) -> int:
        return int(self.ttl.total_seconds())

    async def create(self, identity: SessionIdentity) -> str:
        """Start a session for `identity` and return the cookie value."""
        session_id = secrets.token_urlsafe(32)
        await self.store.set(session_id, identity.to_dict(), ttl=self.ttl_seconds)

        now = utc_now()
        payload = {
            "sid": session_id,
            "iat": now,
            "exp": now + self.ttl,
            "type": TOKEN_TYPE,
        }
        return jwt.encode(payload, self.secret_key, algorithm=ALGORITHM)

    async def resolve(self, token: str | None) -> SessionIdentity | None:
        """Return the identity behind a cookie value, or None."""
        session_id = self._session_id(token)
        if not session_id:
            return None

        data = await self.store.get(session_id)
        if not data:
            return None
        return SessionIdentity.from_dict(data)

    async def destroy(self, token: str | None) -> bool:
        """
        End the session behind a cookie value.

        Returns False if there was no live session. Errors from the
        store propagate.
        """
        session_id = self._session_id(token)
        if not session_id:
            return False
        return await self.store.delete(session_id)

    def _session_id(self, token: str | None) -> str | None:
        if not token:
            return None
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[ALGORITHM])
        except jwt.ExpiredSignatureError:
            logger.debug("Session cookie expired")
            return None
        except jwt.InvalidTokenError as e:
            logger.debug(f"Rejected session cookie: {e}")
            return None

        if payload.get("type") != TOKEN_TYPE:
            return None
        return payload.get("sid")
