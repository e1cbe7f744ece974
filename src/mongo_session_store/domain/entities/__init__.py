"""Domain entities for the session store."""

from .session_document import SessionDocument
from .store_options import (
    DEFAULT_COLLECTION,
    DEFAULT_DBNAME,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_REAP_INTERVAL_MS,
    REAPER_DISABLED,
    ConnectionDetails,
    StoreOptions,
)

__all__ = [
    # Session entities
    "SessionDocument",
    # Configuration entities
    "StoreOptions",
    "ConnectionDetails",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_DBNAME",
    "DEFAULT_COLLECTION",
    "DEFAULT_REAP_INTERVAL_MS",
    "REAPER_DISABLED",
]
