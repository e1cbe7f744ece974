"""MongoDB-backed session store for web-application session middleware."""

from .domain.entities import ConnectionDetails, SessionDocument, StoreOptions
from .domain.exceptions import (
    ConfigurationError,
    ConnectionURLFormatError,
    SessionSerializationError,
    SessionStoreError,
    StoreConnectionError,
    StoreNotReadyError,
)
from .domain.interfaces import SessionStore
from .infrastructure import LocalSessionStore, MongoDBSessionStore, SessionReaper

__version__ = "0.1.0"

__all__ = [
    # Stores
    "SessionStore",
    "MongoDBSessionStore",
    "LocalSessionStore",
    "SessionReaper",
    # Entities
    "ConnectionDetails",
    "SessionDocument",
    "StoreOptions",
    # Errors
    "SessionStoreError",
    "ConfigurationError",
    "ConnectionURLFormatError",
    "StoreConnectionError",
    "StoreNotReadyError",
    "SessionSerializationError",
]
