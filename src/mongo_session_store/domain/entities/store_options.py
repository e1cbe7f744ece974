"""Configuration entities for connecting a session store."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 27017
DEFAULT_DBNAME = "dev"
DEFAULT_COLLECTION = "sessions"
DEFAULT_REAP_INTERVAL_MS = 60 * 1000
REAPER_DISABLED = -1


class ConnectionDetails(BaseModel):
    """One server parsed out of a connection string."""

    model_config = ConfigDict(frozen=True)

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    dbname: str = DEFAULT_DBNAME
    username: Optional[str] = None
    password: Optional[str] = None
    srv: bool = Field(default=False, description="Host is a DNS seed list (mongodb+srv)")
    query: str = Field(default="", description="Raw URI options, e.g. replicaSet=rs0&authSource=admin")

    @property
    def has_credentials(self) -> bool:
        return bool(self.username and self.password)


class StoreOptions(BaseModel):
    """Immutable configuration consumed by the MongoDB session store.

    ``host`` and ``port`` accept either a single value or a list; lists
    describe the members of a replica set and are paired positionally.
    ``url`` overrides the discrete connection fields.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "host": ["db1.internal", "db2.internal"],
                "port": [27017, 27018],
                "dbname": "app",
                "collection": "sessions",
                "reap_interval": 60000,
            }
        },
    )

    host: Union[str, List[str]] = DEFAULT_HOST
    port: Union[int, List[int]] = DEFAULT_PORT
    dbname: str = DEFAULT_DBNAME
    collection: str = DEFAULT_COLLECTION
    username: Optional[Any] = None
    password: Optional[Any] = None
    url: Optional[str] = None
    reap_interval: int = Field(
        default=DEFAULT_REAP_INTERVAL_MS,
        description="Reaper period in milliseconds; -1 disables the reaper",
    )
    client_options: Dict[str, Any] = Field(
        default_factory=dict,
        description="Extra keyword options passed to the MongoDB client",
    )

    @field_validator("username")
    @classmethod
    def _username_is_string(cls, value: Any) -> Any:
        if value is not None and not isinstance(value, str):
            raise ValueError("Username must be a string")
        return value

    @field_validator("password")
    @classmethod
    def _password_is_string(cls, value: Any) -> Any:
        if value is not None and not isinstance(value, str):
            raise ValueError("Password must be a string")
        return value

    @field_validator("reap_interval")
    @classmethod
    def _reap_interval_valid(cls, value: int) -> int:
        if value < REAPER_DISABLED:
            raise ValueError("reap_interval must be a positive number of milliseconds or -1")
        return value

    @model_validator(mode="after")
    def _credentials_come_in_pairs(self) -> "StoreOptions":
        if bool(self.username) != bool(self.password):
            raise ValueError("Need both username and password to make an auth connection.")
        return self

    @property
    def hosts(self) -> List[str]:
        """Configured hosts as a list, falling back to the default host."""
        if isinstance(self.host, list):
            return list(self.host) or [DEFAULT_HOST]
        return [self.host or DEFAULT_HOST]

    @property
    def ports(self) -> List[int]:
        """Configured ports as a list, falling back to the default port."""
        if isinstance(self.port, list):
            return list(self.port) or [DEFAULT_PORT]
        return [self.port or DEFAULT_PORT]

    @property
    def reaper_enabled(self) -> bool:
        return self.reap_interval != REAPER_DISABLED

    @property
    def reap_interval_seconds(self) -> float:
        """Reaper period in seconds; zero means the default period."""
        return (self.reap_interval or DEFAULT_REAP_INTERVAL_MS) / 1000
