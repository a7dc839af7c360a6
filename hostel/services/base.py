"""
Base class for record services.

A record service owns one collection. Every operation is the same cycle:
lock the collection, load it, apply one in-memory transformation, save it.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from hostel.core.errors import NotFoundError
from hostel.core.models import Record
from hostel.storage.base import CollectionRepository, RecordStore

R = TypeVar("R", bound=Record)


class RecordService(Generic[R]):
    """
    Base class for services over a single collection.

    Example:
        class FineService(RecordService[Fine]):
            collection = Collections.FINES
            model = Fine
            not_found_message = "Fine not found"
    """

    collection: str
    model: type[R]
    not_found_message: str = "Record not found"

    def __init__(self, store: RecordStore):
        self.repo: CollectionRepository[R] = CollectionRepository(store, self.collection, self.model)

    async def list_all(self) -> list[R]:
        """Every record, in stored order."""
        return await self.repo.load()

    async def list_for_student(self, student_id: str) -> list[R]:
        """Records owned by one student. Full scan; there is no index."""
        return [r for r in await self.repo.load() if getattr(r, "student_id", None) == student_id]

    async def append(self, record: R) -> R:
        """Add a record at the end of the collection."""
        async with self.repo.locked():
            records = await self.repo.load()
            records.append(record)
            await self.repo.save(records)
        return record

    def find_index(self, records: list[R], record_id: str) -> int:
        """Position of the record with `record_id`; NotFoundError if absent."""
        for i, record in enumerate(records):
            if getattr(record, "id", None) == record_id:
                return i
        raise NotFoundError(self.not_found_message)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(collection={self.collection})>"
