"""Complaints raised by students and settled by wardens."""

from __future__ import annotations

import logging

from hostel.auth.context import SessionIdentity
from hostel.core.errors import ValidationError
from hostel.core.models import Complaint, ComplaintAction
from hostel.services.base import RecordService
from hostel.storage.base import Collections

logger = logging.getLogger(__name__)


class ComplaintService(RecordService[Complaint]):
    collection = Collections.COMPLAINTS
    model = Complaint
    not_found_message = "Complaint not found"

    async def submit(self, caller: SessionIdentity, type: str, description: str) -> Complaint:
        complaint = await self.append(
            Complaint(
                student_id=caller.id,
                student_name=caller.name,
                type=type,
                description=description,
            )
        )
        logger.info(f"Complaint {complaint.id} submitted by user {caller.id}")
        return complaint

    async def update_status(self, complaint_id: str, action: str) -> Complaint:
        """
        Resolve or reject a complaint.

        Applying the same action twice leaves the status unchanged.
        """
        try:
            parsed = ComplaintAction(action)
        except ValueError:
            raise ValidationError(f"Unknown action '{action}'") from None

        async with self.repo.locked():
            complaints = await self.repo.load()
            complaint = complaints[self.find_index(complaints, complaint_id)]
            complaint.status = parsed.resulting_status
            await self.repo.save(complaints)

        logger.info(f"Complaint {complaint_id} marked {complaint.status.value}")
        return complaint
