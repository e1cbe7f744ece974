"""
Store, read and reap a session against the configured backend.

This script:
1. Opens the store selected by the SESSION_STORE_* environment variables
2. Stores a session whose cookie expires in one minute
3. Reads it back, counts sessions and destroys it

Run with SESSION_STORE_STORE_BACKEND=memory to try it without MongoDB.
"""

import asyncio
from datetime import datetime, timedelta, timezone

from mongo_session_store.application import get_settings, open_session_store


async def main():
    settings = get_settings()
    store = await open_session_store(settings)

    print("=" * 60)
    print(f"Connected to the {settings.store_backend} session store")
    print("=" * 60)

    try:
        expires = datetime.now(timezone.utc) + timedelta(minutes=1)
        await store.set("example-session", {"cookie": {"expires": expires}, "user": "alice"})
        print(f"\n✓ Stored session example-session (expires {expires.isoformat()})")

        session = await store.get("example-session")
        print(f"✓ Read back: {session}")
        print(f"✓ Sessions stored: {await store.length()}")

        await store.destroy("example-session")
        print(f"✓ Destroyed, read back: {await store.get('example-session')}")
    finally:
        await store.close()


if __name__ == "__main__":
    asyncio.run(main())
