"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import List, Literal, Optional, Union

from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.entities.store_options import (
    DEFAULT_COLLECTION,
    DEFAULT_DBNAME,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_REAP_INTERVAL_MS,
    StoreOptions,
)


class Settings(BaseSettings):
    """Session store settings loaded from ``SESSION_STORE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SESSION_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    app_name: str = "mongo-session-store"

    # Logging
    log_level: str = "INFO"

    # Backend selection
    store_backend: Literal["mongodb", "memory"] = "mongodb"

    # MongoDB connection (url overrides the discrete fields)
    host: Union[str, List[str]] = DEFAULT_HOST
    port: Union[int, List[int]] = DEFAULT_PORT
    dbname: str = DEFAULT_DBNAME
    collection: str = DEFAULT_COLLECTION
    url: Optional[str] = None

    # MongoDB credentials (optional, both or neither)
    username: Optional[str] = None
    password: Optional[str] = None

    # Reaper period in milliseconds, -1 disables it
    reap_interval: int = DEFAULT_REAP_INTERVAL_MS

    # Driver timeout for selecting a server
    server_selection_timeout_ms: int = 30000

    def to_store_options(self) -> StoreOptions:
        """Build the immutable store options described by these settings."""
        return StoreOptions(
            host=self.host,
            port=self.port,
            dbname=self.dbname,
            collection=self.collection,
            username=self.username,
            password=self.password,
            url=self.url,
            reap_interval=self.reap_interval,
            client_options={"serverSelectionTimeoutMS": self.server_selection_timeout_ms},
        )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
