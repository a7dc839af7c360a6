"""
Hostel backend - data initialization entry point.

Creates the data directory and empty collection files, then seeds the
default student and warden accounts if no users exist yet.

    hostel-init-users

Serve the API with any ASGI server, e.g. `uvicorn hostel.api.app:app`.
"""

from __future__ import annotations

import asyncio
import logging

from hostel.auth.passwords import PasswordHasher
from hostel.auth.seed import DEFAULT_ACCOUNTS, seed_default_users
from hostel.config import Settings, get_settings
from hostel.storage import JsonFileRecordStore


async def init_users(settings: Settings) -> bool:
    """Ensure every collection exists and seed default users."""
    store = JsonFileRecordStore(settings.data_dir)
    await store.ensure_collections()
    return await seed_default_users(store, PasswordHasher(rounds=settings.bcrypt_rounds))


def main():
    """Main entry point."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    if asyncio.run(init_users(settings)):
        print(f"Default users initialized in {settings.data_dir}:")
        for _, role, name, username, password in DEFAULT_ACCOUNTS:
            print(f"  • {role.value}: {username} / {password} ({name})")
    else:
        print("Users already initialized")


if __name__ == "__main__":
    main()
