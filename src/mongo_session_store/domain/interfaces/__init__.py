"""Domain interfaces for the session store."""

from .session_store import SessionStore

__all__ = ["SessionStore"]
