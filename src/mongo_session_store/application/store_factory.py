"""Wiring of the configured session store."""

import logging
from typing import Optional, Union

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from ..infrastructure.local_session_store import LocalSessionStore
from ..infrastructure.mongodb_session_store import MongoDBSessionStore
from ..infrastructure.reaper import ErrorCallback
from .config import Settings, get_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

AnySessionStore = Union[MongoDBSessionStore, LocalSessionStore]


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for processes embedding the store."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def create_session_store(
    settings: Optional[Settings] = None,
    *,
    client: Optional[AsyncIOMotorClient] = None,
    database: Optional[AsyncIOMotorDatabase] = None,
    on_reap_error: Optional[ErrorCallback] = None,
) -> AnySessionStore:
    """Create the session store selected by ``settings.store_backend``.

    Args:
        settings: Store settings (loaded from the environment when omitted).
        client: Optional pre-built MongoDB client.
        database: Optional open MongoDB database handle.
        on_reap_error: Optional callback receiving reaper failures.

    Returns:
        The store, not yet connected.
    """
    settings = settings or get_settings()

    if settings.store_backend == "memory":
        logger.info("Using in-memory session store")
        return LocalSessionStore(reap_interval=settings.reap_interval, on_reap_error=on_reap_error)

    logger.info(f"Using MongoDB session store (collection: {settings.collection})")
    return MongoDBSessionStore(
        settings.to_store_options(),
        client=client,
        database=database,
        on_reap_error=on_reap_error,
    )


async def open_session_store(
    settings: Optional[Settings] = None,
    *,
    client: Optional[AsyncIOMotorClient] = None,
    database: Optional[AsyncIOMotorDatabase] = None,
    on_reap_error: Optional[ErrorCallback] = None,
) -> AnySessionStore:
    """Create the configured session store and connect it.

    Raises:
        StoreConnectionError: If the MongoDB store cannot connect.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    store = create_session_store(
        settings, client=client, database=database, on_reap_error=on_reap_error
    )
    return await store.connect()
