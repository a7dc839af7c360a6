"""
Authentication - password hashing, sessions and the session gate.

Design principles:
1. Server-side sessions keyed by a signed, expiring cookie
2. One dependency per gate (session, role, page role)
3. Never put the password or its hash in a session

The HTTP routes live in `hostel.auth.routes` and are mounted by the app.
"""

from hostel.auth.context import SessionIdentity
from hostel.auth.passwords import PasswordHasher
from hostel.auth.sessions import SessionManager
from hostel.auth.service import AuthService
from hostel.auth.seed import DEFAULT_ACCOUNTS, seed_default_users
from hostel.auth.policies import (
    get_session_identity,
    require_session,
    require_role,
    require_page_role,
)

__all__ = [
    # Identity
    "SessionIdentity",
    # Primitives
    "PasswordHasher",
    "SessionManager",
    # Service
    "AuthService",
    "DEFAULT_ACCOUNTS",
    "seed_default_users",
    # Gates
    "get_session_identity",
    "require_session",
    "require_role",
    "require_page_role",
]
