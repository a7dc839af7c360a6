"""
Local storage implementations.

Collections are JSON array files on the local filesystem; sessions live in
process memory. Neither needs any external service.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from hostel.core.errors import PersistenceError, RecordParseError
from hostel.storage.base import (
    Collections,
    RecordStore,
    SessionStore,
    StorageProvider,
)

logger = logging.getLogger(__name__)


# =============================================================================
# JSON File Record Store
# =============================================================================


class JsonFileRecordStore(RecordStore):
    """Store each collection as `<data_dir>/<collection>.json`."""

    def __init__(self, data_dir: str | Path = "./data", collections: tuple[str, ...] = Collections.ALL):
        self.data_dir = Path(data_dir)
        self.collections = collections
        self._locks: dict[str, asyncio.Lock] = {}

    def path_for(self, collection: str) -> Path:
        return self.data_dir / f"{collection}.json"

    async def load_all(self, collection: str) -> list[dict[str, Any]]:
        path = self.path_for(collection)
        try:
            text = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except OSError as e:
            logger.error(f"Cannot read collection '{collection}' from {path}: {e}")
            raise PersistenceError() from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.error(f"Collection '{collection}' is not valid JSON: {e}")
            raise RecordParseError() from e

        if not isinstance(data, list):
            logger.error(f"Collection '{collection}' holds {type(data).__name__}, expected a JSON array")
            raise RecordParseError()

        return data

    async def save_all(self, collection: str, records: list[dict[str, Any]]) -> None:
        path = self.path_for(collection)
        payload = json.dumps(records, indent=2)
        try:
            await asyncio.to_thread(self._replace, path, payload)
        except OSError as e:
            logger.error(f"Cannot write collection '{collection}' to {path}: {e}")
            raise PersistenceError() from e

    @staticmethod
    def _replace(path: Path, payload: str) -> None:
        # Write beside the target, then rename over it: readers see either
        # the old file or the new one, never a partial write.
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    async def ensure_collections(self) -> None:
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Cannot create data directory {self.data_dir}: {e}")
            raise PersistenceError() from e

        for collection in self.collections:
            if not self.path_for(collection).exists():
                await self.save_all(collection, [])
                logger.info(f"Created empty collection '{collection}'")

    def locked(self, collection: str) -> asyncio.Lock:
        if collection not in self._locks:
            self._locks[collection] = asyncio.Lock()
        return self._locks[collection]


# =============================================================================
# In-Memory Session Store
# =============================================================================


class InMemorySessionStore(SessionStore):
    """In-memory session map. Sessions are lost on restart."""

    def __init__(self):
        self._sessions: dict[str, tuple[Any, float | None]] = {}

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        now = datetime.now(timezone.utc).timestamp()
        self._purge_expired(now)

        expires_at = None
        if ttl:
            expires_at = now + ttl
        self._sessions[key] = (value, expires_at)

    def _purge_expired(self, now: float) -> None:
        """Drop sessions that expired without being read or deleted."""
        expired = [
            key for key, (_, expires_at) in self._sessions.items()
            if expires_at and now > expires_at
        ]
        for key in expired:
            del self._sessions[key]

    async def get(self, key: str) -> Any | None:
        if key not in self._sessions:
            return None

        value, expires_at = self._sessions[key]
        if expires_at and datetime.now(timezone.utc).timestamp() > expires_at:
            del self._sessions[key]
            return None

        return value

    async def delete(self, key: str) -> bool:
        if key in self._sessions:
            del self._sessions[key]
            return True
        return False

    async def exists(self, key: str) -> bool:
        return await self.get(key) is not None


# =============================================================================
# Factory
# =============================================================================


def create_local_storage(data_dir: str | Path = "./data") -> StorageProvider:
    """Create a StorageProvider with local implementations."""
    return StorageProvider(
        records=JsonFileRecordStore(data_dir),
        sessions=InMemorySessionStore(),
    )
