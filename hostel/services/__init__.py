"""Services - one per collection, each a thin read-modify-write cycle."""

from hostel.services.base import RecordService
from hostel.services.rooms import RoomService
from hostel.services.complaints import ComplaintService
from hostel.services.fines import FineService
from hostel.services.gatepasses import GatePassService

__all__ = [
    "RecordService",
    "RoomService",
    "ComplaintService",
    "FineService",
    "GatePassService",
]
