"""Session Store interface."""

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class SessionStore(Protocol):
    """Protocol defining the storage contract used by session middleware.

    This interface can be implemented by different storage backends
    (in-memory, MongoDB, etc.) to provide session persistence.
    """

    async def get(self, session_id: str) -> Optional[Dict[str, Any]]:
        """Fetch the session payload stored for a session ID.

        Args:
            session_id: The unique identifier of the session.

        Returns:
            The stored payload, or None if no session exists for the ID.
        """
        ...

    async def set(self, session_id: str, session: Any) -> None:
        """Create or replace the session stored for a session ID.

        Args:
            session_id: The unique identifier of the session.
            session: The session payload to store.

        Raises:
            SessionSerializationError: If the payload cannot be stored as data.
        """
        ...

    async def destroy(self, session_id: str) -> None:
        """Delete the session for a session ID. Missing sessions are ignored.

        Args:
            session_id: The unique identifier of the session to delete.
        """
        ...

    async def length(self) -> int:
        """Return the number of stored sessions."""
        ...

    async def clear(self) -> None:
        """Remove every stored session."""
        ...
