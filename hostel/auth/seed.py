"""
Default accounts.

Seeds one student and one warden into an empty Users collection so a
fresh install can be logged into.
"""

from __future__ import annotations

import logging

from hostel.auth.passwords import PasswordHasher
from hostel.core.errors import PersistenceError
from hostel.core.models import Role, User
from hostel.storage.base import Collections, RecordStore

logger = logging.getLogger(__name__)

# (id, role, name, username, password)
DEFAULT_ACCOUNTS = [
    ("1", Role.STUDENT, "John Doe", "student", "student123"),
    ("2", Role.WARDEN, "Jane Smith", "warden", "warden123"),
]


async def seed_default_users(store: RecordStore, hasher: PasswordHasher) -> bool:
    """
    Write the default accounts if no users exist yet.

    A missing or unreadable users file counts as empty here; this is the
    only place that tolerates it.

    Returns:
        True if accounts were written, False if users already existed.
    """
    try:
        existing = await store.load_all(Collections.USERS)
    except PersistenceError:
        existing = []

    if existing:
        logger.info("Users already initialized")
        return False

    users = [
        User(
            id=user_id,
            role=role,
            name=name,
            username=username,
            password_hash=await hasher.hash(password),
        )
        for user_id, role, name, username, password in DEFAULT_ACCOUNTS
    ]
    await store.save_all(Collections.USERS, [u.to_json() for u in users])
    logger.info(f"Seeded {len(users)} default users")
    return True
