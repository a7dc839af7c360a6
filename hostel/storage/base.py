"""
Storage abstraction layer.

All persistence goes through these interfaces. Handlers never touch files
or the session map directly; they receive a StorageProvider and use the
interfaces without knowing the underlying implementation.

- RecordStore  → one JSON array file per collection
- SessionStore → server-side session data keyed by session id
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from hostel.core.models import Record

R = TypeVar("R", bound=Record)


# =============================================================================
# Storage Interfaces
# =============================================================================


class RecordStore(ABC):
    """
    Whole-collection persistence.

    Every call reads or rewrites the entire collection. There is no
    in-process cache: the backing file is the single source of truth.
    """

    @abstractmethod
    async def load_all(self, collection: str) -> list[dict[str, Any]]:
        """Read every record of a collection, in stored order."""
        pass

    @abstractmethod
    async def save_all(self, collection: str, records: list[dict[str, Any]]) -> None:
        """Replace the collection with `records`."""
        pass

    @abstractmethod
    async def ensure_collections(self) -> None:
        """Create an empty collection for every name that does not exist yet."""
        pass

    @abstractmethod
    def locked(self, collection: str) -> AbstractAsyncContextManager[None]:
        """Serialize read-modify-write cycles on one collection."""
        pass


class SessionStore(ABC):
    """
    Key-value store for session data, with expiry.

    Local Implementation: In-memory dict
    """

    @abstractmethod
    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """Set a value with optional TTL in seconds."""
        pass

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Get a value."""
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete a key."""
        pass

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Check if key exists."""
        pass


# =============================================================================
# Typed access to one collection
# =============================================================================


class CollectionRepository(Generic[R]):
    """
    Typed view of a single collection.

    Loads raw records through a RecordStore and validates them into
    `model`; saves by dumping back to camelCase JSON.
    """

    def __init__(self, store: RecordStore, collection: str, model: type[R]):
        self.store = store
        self.collection = collection
        self.model = model

    async def load(self) -> list[R]:
        raw = await self.store.load_all(self.collection)
        return [self.model.model_validate(item) for item in raw]

    async def save(self, records: list[R]) -> None:
        await self.store.save_all(self.collection, [r.to_json() for r in records])

    def locked(self) -> AbstractAsyncContextManager[None]:
        return self.store.locked(self.collection)


# =============================================================================
# Storage Provider (dependency injection container)
# =============================================================================


class StorageProvider(BaseModel):
    """
    Container for all storage backends.

    Initialize once at app startup with appropriate implementations.
    """

    model_config = {"arbitrary_types_allowed": True}

    records: RecordStore
    sessions: SessionStore


# =============================================================================
# Collection Names (for RecordStore)
# =============================================================================


class Collections:
    """Standard collection names. Each maps to `<name>.json`."""

    USERS = "users"
    ROOMS = "rooms"
    COMPLAINTS = "complaints"
    FINES = "fines"
    GATEPASSES = "gatepasses"

    ALL = (USERS, ROOMS, COMPLAINTS, FINES, GATEPASSES)
