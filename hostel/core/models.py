"""
Core data models for the hostel backend.

These models represent the persisted records: Users, Rooms, Complaints,
Fines and Gate Passes. Each collection file stores them as camelCase JSON
objects; the models accept and emit that shape.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from hostel.core.utils import generate_id, iso_timestamp


# =============================================================================
# Enums
# =============================================================================


class Role(str, Enum):
    """Who is logged in."""

    STUDENT = "student"
    WARDEN = "warden"


class ComplaintStatus(str, Enum):
    """Lifecycle of a complaint. Changed once by a warden."""

    PENDING = "pending"
    RESOLVED = "resolved"
    REJECTED = "rejected"


class ComplaintAction(str, Enum):
    """Warden actions on a complaint, as they appear in the URL."""

    RESOLVE = "resolve"
    REJECT = "reject"

    @property
    def resulting_status(self) -> ComplaintStatus:
        if self is ComplaintAction.RESOLVE:
            return ComplaintStatus.RESOLVED
        return ComplaintStatus.REJECTED


ROOM_BOOKED = "booked"
FINE_PENDING = "pending"
GATEPASS_PENDING = "pending"

# Gate pass status is free-form; these are the values the dashboards use
KNOWN_GATEPASS_STATUSES = frozenset({"pending", "approved", "rejected"})


# =============================================================================
# Base
# =============================================================================


class Record(BaseModel):
    """
    A row in a collection file.

    Unknown keys are kept so that a load/save cycle never drops data
    written by another version.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        coerce_numbers_to_str=True,
    )

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


# =============================================================================
# Records
# =============================================================================


class User(Record):
    """An account. Created by seeding, never modified by the API."""

    id: str
    role: Role
    name: str
    username: str
    password_hash: str


class Room(Record):
    """A booked room. At most one record per room number."""

    room_number: str
    student_id: str
    status: str = ROOM_BOOKED


class Complaint(Record):
    """A complaint raised by a student."""

    id: str = Field(default_factory=generate_id)
    student_id: str
    student_name: str
    type: str
    description: str
    status: ComplaintStatus = ComplaintStatus.PENDING
    date: str = Field(default_factory=iso_timestamp)


class Fine(Record):
    """A fine issued by a warden."""

    id: str = Field(default_factory=generate_id)
    student_id: str
    amount: int | float
    reason: str
    status: str = FINE_PENDING
    date: str = Field(default_factory=iso_timestamp)


class GatePass(Record):
    """
    A request to leave the hostel.

    `date` and `time` are the requested departure, as entered by the
    student; they are not parsed.
    """

    id: str = Field(default_factory=generate_id)
    student_id: str
    student_name: str
    reason: str
    date: str
    time: str
    status: str = GATEPASS_PENDING
