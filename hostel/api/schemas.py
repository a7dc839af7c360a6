"""
Request/response payloads for the HTTP API.

JSON keys are camelCase; Python attributes are snake_case.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from hostel.core.models import Complaint, Fine, GatePass


class Payload(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


# =============================================================================
# Requests
# =============================================================================


class LoginRequest(Payload):
    # Presence is checked by the auth service so that a missing field gets
    # the same 400 message as an empty one.
    role: str | None = None
    username: str | None = None
    password: str | None = None


class BookRoomRequest(Payload):
    room_number: str = Field(min_length=1)


class ComplaintRequest(Payload):
    type: str = Field(min_length=1)
    description: str = Field(min_length=1)


class FineRequest(Payload):
    student_id: str = Field(min_length=1)
    amount: int | float
    reason: str = Field(min_length=1)


class GatePassRequest(Payload):
    reason: str = Field(min_length=1)
    date: str = Field(min_length=1)
    time: str = Field(min_length=1)


class GatePassStatusRequest(Payload):
    status: str = Field(min_length=1)


# =============================================================================
# Responses
# =============================================================================


class MessageResponse(Payload):
    success: bool = True
    message: str


class ErrorResponse(Payload):
    success: bool = False
    message: str


class SuccessResponse(Payload):
    success: bool = True


class UserResponse(Payload):
    id: str
    role: str
    name: str


class LoginResponse(Payload):
    success: bool = True
    user: UserResponse


class ComplaintListResponse(Payload):
    success: bool = True
    complaints: list[Complaint]


class FineListResponse(Payload):
    success: bool = True
    fines: list[Fine]


class GatePassListResponse(Payload):
    success: bool = True
    gatepasses: list[GatePass]
