"""Session document entity persisted by the session stores."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class SessionDocument(BaseModel):
    """A stored session, laid out as ``{_id, session, expires?}``."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "_id": "Yq3bB2V0s1N8cQ",
                "session": {"cookie": {"expires": "2026-10-20T10:00:00.000Z"}, "user": "abc123"},
                "expires": 1792490400000,
            }
        },
    )

    id: str = Field(alias="_id")
    session: Dict[str, Any] = Field(default_factory=dict)
    expires: Optional[int] = Field(default=None, description="Cookie expiry in epoch milliseconds")

    def is_expired(self, now_ms: int) -> bool:
        """Return True when the document carries an expiry at or before ``now_ms``."""
        return self.expires is not None and self.expires <= now_ms

    def to_document(self, include_id: bool = True) -> Dict[str, Any]:
        """Return the database representation of this session.

        Args:
            include_id: Whether to include the ``_id`` key (left out for update bodies).
        """
        exclude = None if include_id else {"id"}
        return self.model_dump(by_alias=True, exclude_none=True, exclude=exclude)
