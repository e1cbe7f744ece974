"""Exceptions raised by the session store."""


class SessionStoreError(Exception):
    """Base class for all session store errors."""


class ConfigurationError(SessionStoreError, ValueError):
    """Raised when the store configuration is invalid."""


class ConnectionURLFormatError(ConfigurationError):
    """Raised when a connection string segment does not use a mongo scheme."""


class StoreConnectionError(SessionStoreError, ConnectionError):
    """Raised when the store cannot connect or authenticate to the database."""


class StoreNotReadyError(SessionStoreError, RuntimeError):
    """Raised when an operation is invoked before connect() or after close()."""

    def __init__(self, message: str = "Session store is not connected"):
        super().__init__(message)


class SessionSerializationError(SessionStoreError, ValueError):
    """Raised when a session payload cannot be converted to plain data."""
