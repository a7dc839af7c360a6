"""
Record endpoints: rooms, complaints, fines, gate passes.

Every route requires a session. Warden-only routes take their identity from
`require_role(Role.WARDEN, ...)`, which answers 403 before the body is
looked at. Bodies are parsed by `json_body`, declared after the gate, so
the gate runs first even for malformed JSON.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from hostel.api.dependencies import (
    json_body,
    get_complaint_service,
    get_fine_service,
    get_gatepass_service,
    get_room_service,
)
from hostel.api.schemas import (
    BookRoomRequest,
    ComplaintListResponse,
    ComplaintRequest,
    FineListResponse,
    FineRequest,
    GatePassListResponse,
    GatePassRequest,
    GatePassStatusRequest,
    MessageResponse,
)
from hostel.auth.context import SessionIdentity
from hostel.auth.policies import require_role, require_session
from hostel.core.models import Role
from hostel.services import ComplaintService, FineService, GatePassService, RoomService

router = APIRouter(prefix="/api")


# =============================================================================
# Rooms
# =============================================================================


@router.post("/rooms/book", response_model=MessageResponse, tags=["rooms"])
async def book_room(
    identity: SessionIdentity = Depends(require_session),
    data: BookRoomRequest = Depends(json_body(BookRoomRequest)),
    rooms: RoomService = Depends(get_room_service),
):
    """Book a room for the logged-in user."""
    await rooms.book(data.room_number, identity)
    return MessageResponse(message="Room booked successfully")


# =============================================================================
# Complaints
# =============================================================================


@router.post("/complaints", response_model=MessageResponse, tags=["complaints"])
async def submit_complaint(
    identity: SessionIdentity = Depends(require_session),
    data: ComplaintRequest = Depends(json_body(ComplaintRequest)),
    complaints: ComplaintService = Depends(get_complaint_service),
):
    await complaints.submit(identity, data.type, data.description)
    return MessageResponse(message="Complaint submitted successfully")


@router.get("/complaints", response_model=ComplaintListResponse, tags=["complaints"])
async def list_complaints(
    identity: SessionIdentity = Depends(
        require_role(Role.WARDEN, "Only wardens can view all complaints")
    ),
    complaints: ComplaintService = Depends(get_complaint_service),
):
    """All complaints, for the warden dashboard."""
    return ComplaintListResponse(complaints=await complaints.list_all())


@router.get("/student/complaints", response_model=ComplaintListResponse, tags=["complaints"])
async def list_own_complaints(
    identity: SessionIdentity = Depends(require_session),
    complaints: ComplaintService = Depends(get_complaint_service),
):
    return ComplaintListResponse(complaints=await complaints.list_for_student(identity.id))


@router.put("/complaints/{complaint_id}/{action}", response_model=MessageResponse, tags=["complaints"])
async def update_complaint(
    complaint_id: str,
    action: str,
    identity: SessionIdentity = Depends(
        require_role(Role.WARDEN, "Only wardens can update complaints")
    ),
    complaints: ComplaintService = Depends(get_complaint_service),
):
    """
    Resolve or reject a complaint.

    `action` is `resolve` or `reject`.
    """
    complaint = await complaints.update_status(complaint_id, action)
    return MessageResponse(message=f"Complaint {complaint.status.value} successfully")


# =============================================================================
# Fines
# =============================================================================


@router.post("/fines", response_model=MessageResponse, tags=["fines"])
async def add_fine(
    identity: SessionIdentity = Depends(
        require_role(Role.WARDEN, "Only wardens can add fines")
    ),
    data: FineRequest = Depends(json_body(FineRequest)),
    fines: FineService = Depends(get_fine_service),
):
    await fines.add(data.student_id, data.amount, data.reason)
    return MessageResponse(message="Fine added successfully")


@router.get("/student/fines", response_model=FineListResponse, tags=["fines"])
async def list_own_fines(
    identity: SessionIdentity = Depends(require_session),
    fines: FineService = Depends(get_fine_service),
):
    return FineListResponse(fines=await fines.list_for_student(identity.id))


# =============================================================================
# Gate Passes
# =============================================================================


@router.post("/gatepass", response_model=MessageResponse, tags=["gatepass"])
async def apply_gatepass(
    identity: SessionIdentity = Depends(require_session),
    data: GatePassRequest = Depends(json_body(GatePassRequest)),
    gatepasses: GatePassService = Depends(get_gatepass_service),
):
    await gatepasses.apply(identity, data.reason, data.date, data.time)
    return MessageResponse(message="Gate pass applied successfully")


@router.get("/gatepass", response_model=GatePassListResponse, tags=["gatepass"])
async def list_gatepasses(
    identity: SessionIdentity = Depends(
        require_role(Role.WARDEN, "Only wardens can view all gate passes")
    ),
    gatepasses: GatePassService = Depends(get_gatepass_service),
):
    return GatePassListResponse(gatepasses=await gatepasses.list_all())


@router.get("/student/gatepass", response_model=GatePassListResponse, tags=["gatepass"])
async def list_own_gatepasses(
    identity: SessionIdentity = Depends(require_session),
    gatepasses: GatePassService = Depends(get_gatepass_service),
):
    return GatePassListResponse(gatepasses=await gatepasses.list_for_student(identity.id))


@router.put("/gatepass/{gatepass_id}", response_model=MessageResponse, tags=["gatepass"])
async def update_gatepass(
    gatepass_id: str,
    identity: SessionIdentity = Depends(
        require_role(Role.WARDEN, "Only wardens can update gate pass status")
    ),
    data: GatePassStatusRequest = Depends(json_body(GatePassStatusRequest)),
    gatepasses: GatePassService = Depends(get_gatepass_service),
):
    """
    Set a gate pass status.

    Any non-empty status string is stored as given.
    """
    await gatepasses.update_status(gatepass_id, data.status)
    return MessageResponse(message="Gate pass status updated successfully")
