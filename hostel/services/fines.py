"""Fines issued by wardens."""

from __future__ import annotations

import logging

from hostel.core.models import Fine
from hostel.services.base import RecordService
from hostel.storage.base import Collections

logger = logging.getLogger(__name__)


class FineService(RecordService[Fine]):
    collection = Collections.FINES
    model = Fine
    not_found_message = "Fine not found"

    async def add(self, student_id: str, amount: int | float, reason: str) -> Fine:
        # No duplicate check: the same fine may be issued twice on purpose.
        # The student id is not checked against the users collection.
        fine = await self.append(Fine(student_id=student_id, amount=amount, reason=reason))
        logger.info(f"Fine {fine.id} of {amount} added for student {student_id}")
        return fine
