"""Room booking."""

from __future__ import annotations

import logging

from hostel.auth.context import SessionIdentity
from hostel.core.errors import ValidationError
from hostel.core.models import Room
from hostel.services.base import RecordService
from hostel.storage.base import Collections

logger = logging.getLogger(__name__)


class RoomService(RecordService[Room]):
    collection = Collections.ROOMS
    model = Room
    not_found_message = "Room not found"

    async def book(self, room_number: str, caller: SessionIdentity) -> Room:
        """
        Book a room for the caller.

        There is no release operation: once a number is taken, every
        later booking of it fails.
        """
        async with self.repo.locked():
            rooms = await self.repo.load()
            if any(r.room_number == room_number for r in rooms):
                raise ValidationError("Room already booked")

            room = Room(room_number=room_number, student_id=caller.id)
            rooms.append(room)
            await self.repo.save(rooms)

        logger.info(f"Room {room_number} booked by user {caller.id}")
        return room
