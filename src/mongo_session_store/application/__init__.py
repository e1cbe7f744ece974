"""Application layer: settings and store wiring."""

from .config import Settings, get_settings
from .store_factory import configure_logging, create_session_store, open_session_store

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "create_session_store",
    "open_session_store",
]
