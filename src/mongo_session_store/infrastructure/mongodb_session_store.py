"""MongoDB implementation of Session Store."""

import logging
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from pymongo.errors import PyMongoError

from ..domain.entities.session_document import SessionDocument
from ..domain.entities.store_options import ConnectionDetails, StoreOptions
from ..domain.exceptions import StoreConnectionError, StoreNotReadyError
from ..domain.interfaces.session_store import SessionStore
from ..domain.services.session_payload import build_session_document, now_ms
from .connection_url import (
    build_client_uri,
    build_connection_url,
    parse_connection_url,
    redact_url,
)
from .reaper import ErrorCallback, SessionReaper

logger = logging.getLogger(__name__)


class MongoDBSessionStore(SessionStore):
    """MongoDB store for web-session persistence.

    Sessions live in a single collection as ``{_id, session, expires?}``
    documents. The store must be connected with :meth:`connect` before use;
    operations invoked earlier raise :class:`StoreNotReadyError`.
    """

    def __init__(
        self,
        options: Optional[StoreOptions] = None,
        *,
        client: Optional[AsyncIOMotorClient] = None,
        database: Optional[AsyncIOMotorDatabase] = None,
        on_reap_error: Optional[ErrorCallback] = None,
    ):
        """Initialize the MongoDB session store.

        Args:
            options: Connection and collection settings (defaults apply when omitted).
            client: A pre-built client; the database is selected by ``options.dbname``.
            database: An open database handle; overrides ``client`` and the
                connection settings.
            on_reap_error: Optional callback receiving reaper failures.
        """
        self.options = options or StoreOptions()
        self.details: List[ConnectionDetails] = []
        self._owns_client = False
        self._collection: Optional[AsyncIOMotorCollection] = None

        if database is not None:
            self.url = None
            self._client = database.client
            self._db = database
        elif client is not None:
            self.url = None
            self._client = client
            self._db = client[self.options.dbname]
        else:
            self.url = build_connection_url(self.options)
            self.details = parse_connection_url(self.url)
            self._client = AsyncIOMotorClient(
                build_client_uri(self.details), **self.options.client_options
            )
            self._db = self._client[self.details[0].dbname]
            self._owns_client = True

        self.reaper: Optional[SessionReaper] = None
        if self.options.reaper_enabled:
            self.reaper = SessionReaper(
                self.reap,
                self.options.reap_interval_seconds,
                on_error=on_reap_error,
            )

    @property
    def is_replica_set(self) -> bool:
        """True when the connection string named more than one server."""
        return len(self.details) > 1

    @property
    def connected(self) -> bool:
        return self._collection is not None

    async def connect(self) -> "MongoDBSessionStore":
        """Connect to MongoDB, resolve the collection and start the reaper.

        Returns:
            MongoDBSessionStore: This store, ready for use.

        Raises:
            StoreConnectionError: If the server cannot be reached or
                authentication fails.
        """
        if self.connected:
            return self

        target = redact_url(self.url) if self.url else self._db.name
        try:
            await self._db.command("ping")
        except PyMongoError as e:
            raise StoreConnectionError(f"Error connecting to {target} ({e})") from e

        self._collection = self._db[self.options.collection]
        if self.reaper is not None:
            self.reaper.start()

        logger.info(f"Session store connected to {target} (collection: {self.options.collection})")
        return self

    async def close(self) -> None:
        """Stop the reaper and release the client if this store created it."""
        if self.reaper is not None:
            await self.reaper.stop()
        self._collection = None
        if self._owns_client:
            self._client.close()
        logger.info("Session store closed")

    async def __aenter__(self) -> "MongoDBSessionStore":
        return await self.connect()

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    def get_collection(self) -> AsyncIOMotorCollection:
        """Return the sessions collection.

        Raises:
            StoreNotReadyError: If the store is not connected.
        """
        if self._collection is None:
            raise StoreNotReadyError()
        return self._collection

    async def get(self, session_id: str) -> Optional[Dict[str, Any]]:
        """Fetch a session payload from MongoDB.

        Args:
            session_id: The unique identifier of the session.

        Returns:
            The stored payload, or None if the session does not exist.
        """
        item = await self.get_collection().find_one({"_id": session_id})
        if item is None:
            return None
        return SessionDocument.model_validate(item).session

    async def set(self, session_id: str, session: Any) -> None:
        """Create or replace a session in MongoDB.

        Args:
            session_id: The unique identifier of the session.
            session: The session payload.

        Raises:
            SessionSerializationError: If the payload cannot be stored as data.
        """
        collection = self.get_collection()
        document = build_session_document(session_id, session)
        await collection.update_one(
            {"_id": session_id}, {"$set": document.to_document(include_id=False)}, upsert=True
        )
        logger.debug(f"Stored session {session_id}")

    async def destroy(self, session_id: str) -> None:
        """Delete a session from MongoDB. Missing sessions are ignored."""
        await self.get_collection().delete_one({"_id": session_id})
        logger.debug(f"Destroyed session {session_id}")

    async def length(self) -> int:
        """Count the sessions in the collection."""
        return await self.get_collection().count_documents({})

    async def clear(self) -> None:
        """Drop the sessions collection."""
        await self.get_collection().drop()
        logger.info(f"Dropped session collection {self.options.collection}")

    async def reap(self) -> int:
        """Delete every session whose expiry has passed.

        Returns:
            int: Number of sessions deleted.
        """
        result = await self.get_collection().delete_many({"expires": {"$lte": now_ms()}})
        return result.deleted_count
