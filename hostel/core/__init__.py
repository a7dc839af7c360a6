"""
Core module - fundamental data models and infrastructure.

This module contains:
- models: Persisted records (User, Room, Complaint, Fine, GatePass)
- errors: Error taxonomy mapped to HTTP statuses
- utils: Shared utility functions
"""

from hostel.core.models import (
    Record,
    User,
    Room,
    Complaint,
    Fine,
    GatePass,
    Role,
    ComplaintStatus,
    ComplaintAction,
)

from hostel.core.errors import (
    HostelError,
    ValidationError,
    AuthError,
    NotAuthenticatedError,
    ForbiddenError,
    PageRedirect,
    NotFoundError,
    PersistenceError,
    RecordParseError,
    SessionError,
)

from hostel.core.utils import (
    generate_id,
    iso_timestamp,
    utc_now,
)

__all__ = [
    # Models
    "Record",
    "User",
    "Room",
    "Complaint",
    "Fine",
    "GatePass",
    "Role",
    "ComplaintStatus",
    "ComplaintAction",
    # Errors
    "HostelError",
    "ValidationError",
    "AuthError",
    "NotAuthenticatedError",
    "ForbiddenError",
    "PageRedirect",
    "NotFoundError",
    "PersistenceError",
    "RecordParseError",
    "SessionError",
    # Utils
    "generate_id",
    "iso_timestamp",
    "utc_now",
]
