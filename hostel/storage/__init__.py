"""
Storage abstractions.

- RecordStore → JSON array file per collection
- SessionStore → in-memory session map
"""

from hostel.storage.base import (
    RecordStore,
    SessionStore,
    CollectionRepository,
    StorageProvider,
    Collections,
)
from hostel.storage.local import (
    JsonFileRecordStore,
    InMemorySessionStore,
    create_local_storage,
)

__all__ = [
    "RecordStore",
    "SessionStore",
    "CollectionRepository",
    "StorageProvider",
    "Collections",
    "JsonFileRecordStore",
    "InMemorySessionStore",
    "create_local_storage",
]
