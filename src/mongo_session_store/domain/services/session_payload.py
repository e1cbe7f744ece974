"""Conversion of session payloads into storable documents.

Payloads handed over by the middleware may carry helper members (bound
methods, callbacks) next to their data. Before storage the payload is forced
into plain JSON data: callables are dropped from mappings and replaced by
``None`` inside sequences, and rich values such as datetimes, UUIDs and
pydantic models are converted to their JSON form.
"""

import time
from collections.abc import Mapping
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_jsonable_python

from ..entities.session_document import SessionDocument
from ..exceptions import SessionSerializationError


def now_ms() -> int:
    """Current time in epoch milliseconds."""
    return int(time.time() * 1000)


def _strip_callables(value: Any) -> Any:
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json")
    if isinstance(value, Mapping):
        return {key: _strip_callables(item) for key, item in value.items() if not callable(item)}
    if isinstance(value, (list, tuple)):
        return [None if callable(item) else _strip_callables(item) for item in value]
    return value


def to_plain_data(session: Any) -> Dict[str, Any]:
    """Convert a session payload into a JSON-compatible dictionary.

    Args:
        session: A mapping or pydantic model holding the session state.

    Returns:
        Dict: The payload as plain JSON data.

    Raises:
        SessionSerializationError: If the payload is not a mapping or holds
            values with no JSON representation.
    """
    stripped = _strip_callables(session)
    if not isinstance(stripped, dict):
        raise SessionSerializationError(
            f"Session payload must be a mapping, got {type(session).__name__}"
        )
    try:
        data = to_jsonable_python(stripped)
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise SessionSerializationError(f"Session payload is not serializable: {e}") from e
    return data


def _parse_expiry(value: Any) -> int:
    if isinstance(value, bool):
        raise SessionSerializationError(f"Invalid cookie expiry: {value!r}")
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, str):
        try:
            moment = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            try:
                moment = parsedate_to_datetime(value)
            except (TypeError, ValueError) as e:
                raise SessionSerializationError(f"Invalid cookie expiry: {value!r}") from e
    else:
        raise SessionSerializationError(f"Invalid cookie expiry: {value!r}")

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return int(moment.timestamp() * 1000)


def cookie_expiry_ms(session: Mapping) -> Optional[int]:
    """Extract ``cookie.expires`` from a session payload as epoch milliseconds.

    Returns None when the payload has no cookie or the cookie does not expire.
    """
    cookie = session.get("cookie")
    if not isinstance(cookie, Mapping):
        return None
    expires = cookie.get("expires")
    if expires is None or expires == "":
        return None
    return _parse_expiry(expires)


def build_session_document(session_id: str, session: Any) -> SessionDocument:
    """Build the document stored for ``session_id`` from a raw payload."""
    data = to_plain_data(session)
    return SessionDocument(id=session_id, session=data, expires=cookie_expiry_ms(data))
