"""Domain services for the session store."""

from .session_payload import build_session_document, cookie_expiry_ms, now_ms, to_plain_data

__all__ = ["build_session_document", "cookie_expiry_ms", "now_ms", "to_plain_data"]
