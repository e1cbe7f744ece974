"""Local in-memory implementation of Session Store."""

import logging
from typing import Any, Dict, Optional

from ..domain.entities.session_document import SessionDocument
from ..domain.entities.store_options import DEFAULT_REAP_INTERVAL_MS, REAPER_DISABLED
from ..domain.interfaces.session_store import SessionStore
from ..domain.services.session_payload import build_session_document, now_ms
from .reaper import ErrorCallback, SessionReaper

logger = logging.getLogger(__name__)


class LocalSessionStore(SessionStore):
    """Local in-memory implementation of the Session Store.

    Stores session documents in a dictionary for testing and development
    purposes. Payloads go through the same conversion and expiry rules as
    the MongoDB store.
    """

    def __init__(
        self,
        reap_interval: int = DEFAULT_REAP_INTERVAL_MS,
        on_reap_error: Optional[ErrorCallback] = None,
    ):
        """Initialize the local session store with an empty dictionary.

        Args:
            reap_interval: Reaper period in milliseconds; -1 disables the reaper.
            on_reap_error: Optional callback receiving reaper failures.
        """
        self._sessions: Dict[str, SessionDocument] = {}
        self.reaper: Optional[SessionReaper] = None
        if reap_interval != REAPER_DISABLED:
            self.reaper = SessionReaper(
                self.reap,
                (reap_interval or DEFAULT_REAP_INTERVAL_MS) / 1000,
                on_error=on_reap_error,
            )

    async def connect(self) -> "LocalSessionStore":
        """Start the reaper. The dictionary itself needs no connection."""
        if self.reaper is not None:
            self.reaper.start()
        return self

    async def close(self) -> None:
        """Stop the reaper."""
        if self.reaper is not None:
            await self.reaper.stop()

    async def __aenter__(self) -> "LocalSessionStore":
        return await self.connect()

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def get(self, session_id: str) -> Optional[Dict[str, Any]]:
        """Retrieve a session payload from the in-memory dictionary.

        Args:
            session_id: The unique identifier of the session.

        Returns:
            A copy of the stored payload, or None if the session does not exist.
        """
        document = self._sessions.get(session_id)
        if document is None:
            return None
        return document.model_copy(deep=True).session

    async def set(self, session_id: str, session: Any) -> None:
        """Create or replace a session in the in-memory dictionary.

        A payload without a cookie expiry keeps the previously stored expiry,
        matching the MongoDB ``$set`` update.
        """
        document = build_session_document(session_id, session)
        previous = self._sessions.get(session_id)
        if document.expires is None and previous is not None:
            document.expires = previous.expires
        self._sessions[session_id] = document

    async def destroy(self, session_id: str) -> None:
        """Delete a session from the in-memory dictionary, if present."""
        self._sessions.pop(session_id, None)

    async def length(self) -> int:
        """Count the stored sessions."""
        return len(self._sessions)

    async def clear(self) -> None:
        """Remove all sessions from the dictionary."""
        self._sessions.clear()

    async def reap(self, now: Optional[int] = None) -> int:
        """Delete every session whose expiry is at or before ``now``.

        Args:
            now: Reference time in epoch milliseconds (defaults to the current time).

        Returns:
            int: Number of sessions deleted.
        """
        now = now_ms() if now is None else now
        expired = [sid for sid, document in self._sessions.items() if document.is_expired(now)]
        for session_id in expired:
            del self._sessions[session_id]
        return len(expired)

    def get_all_sessions(self) -> Dict[str, SessionDocument]:
        """Get all session documents.

        Returns:
            Dict[str, SessionDocument]: Dictionary of all sessions.
        """
        return self._sessions.copy()
