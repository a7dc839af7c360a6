"""
Authentication service.

Checks role/username/password against the Users collection and opens or
closes server-side sessions.
"""

from __future__ import annotations

import logging

from hostel.auth.context import SessionIdentity
from hostel.auth.passwords import PasswordHasher
from hostel.auth.sessions import SessionManager
from hostel.core.errors import (
    AuthError,
    PersistenceError,
    SessionError,
    ValidationError,
)
from hostel.core.models import User
from hostel.storage.base import Collections, CollectionRepository, RecordStore

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService:
    """Login and logout."""

    def __init__(self, store: RecordStore, hasher: PasswordHasher, sessions: SessionManager):
        self.users = CollectionRepository(store, Collections.USERS, User)
        self.hasher = hasher
        self.sessions = sessions

    async def login(self, role: str, username: str, password: str) -> tuple[SessionIdentity, str]:
        """
        Authenticate and open a session.

        Unknown accounts and wrong passwords fail with the same message so
        the response does not reveal which usernames exist.

        Returns:
            The session identity and the session cookie value.
        """
        if not role or not username or not password:
            raise ValidationError("All fields are required")

        user = await self.find_user(role, username)
        if user is None:
            logger.info(f"Login rejected: no {role} account '{username}'")
            raise AuthError(INVALID_CREDENTIALS)

        try:
            valid = await self.hasher.verify(password, user.password_hash)
        except ValueError as e:
            logger.error(f"Stored password hash for user {user.id} is malformed: {e}")
            raise PersistenceError() from e

        if not valid:
            logger.info(f"Login rejected: wrong password for user {user.id}")
            raise AuthError(INVALID_CREDENTIALS)

        identity = SessionIdentity.from_user(user)
        token = await self.sessions.create(identity)
        logger.info(f"User {identity.id} logged in as {identity.role.value}")
        return identity, token

    async def logout(self, token: str | None) -> None:
        """Destroy the session behind `token`."""
        try:
            destroyed = await self.sessions.destroy(token)
        except Exception as e:
            logger.error(f"Session teardown failed: {e}")
            raise SessionError() from e
        logger.info("Session closed" if destroyed else "Logout without a live session")

    async def find_user(self, role: str, username: str) -> User | None:
        """First user matching both username and role."""
        for user in await self.users.load():
            if user.username == username and user.role.value == role:
                return user
        return None
