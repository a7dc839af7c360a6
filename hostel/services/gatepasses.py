"""Gate pass applications."""

from __future__ import annotations

import logging

from hostel.auth.context import SessionIdentity
from hostel.core.models import KNOWN_GATEPASS_STATUSES, GatePass
from hostel.services.base import RecordService
from hostel.storage.base import Collections

logger = logging.getLogger(__name__)


class GatePassService(RecordService[GatePass]):
    collection = Collections.GATEPASSES
    model = GatePass
    not_found_message = "Gate pass not found"

    async def apply(self, caller: SessionIdentity, reason: str, date: str, time: str) -> GatePass:
        gatepass = await self.append(
            GatePass(
                student_id=caller.id,
                student_name=caller.name,
                reason=reason,
                date=date,
                time=time,
            )
        )
        logger.info(f"Gate pass {gatepass.id} requested by user {caller.id}")
        return gatepass

    async def update_status(self, gatepass_id: str, status: str) -> GatePass:
        """
        Overwrite a gate pass status with `status`, verbatim.

        The value is not restricted to a fixed set; unfamiliar values are
        stored but logged.
        """
        if status not in KNOWN_GATEPASS_STATUSES:
            logger.warning(f"Gate pass {gatepass_id} set to unrecognized status '{status}'")

        async with self.repo.locked():
            gatepasses = await self.repo.load()
            gatepass = gatepasses[self.find_index(gatepasses, gatepass_id)]
            gatepass.status = status
            await self.repo.save(gatepasses)

        logger.info(f"Gate pass {gatepass_id} set to '{status}'")
        return gatepass
