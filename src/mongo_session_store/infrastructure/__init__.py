"""Infrastructure layer components."""

from .connection_url import build_client_uri, build_connection_url, parse_connection_url
from .local_session_store import LocalSessionStore
from .mongodb_session_store import MongoDBSessionStore
from .reaper import SessionReaper

__all__ = [
    "LocalSessionStore",
    "MongoDBSessionStore",
    "SessionReaper",
    "build_client_uri",
    "build_connection_url",
    "parse_connection_url",
]
