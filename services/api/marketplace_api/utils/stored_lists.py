"""
Stored URL Lists

Listings keep media and certificate URLs as JSON text in a single column.
Values written by older clients may be NULL, empty, not JSON at all, or
JSON that is not a list of strings. StoredUrlList makes those cases
explicit at the boundary instead of catching parse errors per endpoint.
"""

import enum
import json
from dataclasses import dataclass
from typing import Any, Optional

from observability import get_logger

logger = get_logger(__name__)


class StoredListState(str, enum.Enum):
    ABSENT = "absent"
    MALFORMED = "malformed"
    VALID = "valid"


@dataclass(frozen=True)
class StoredUrlList:
    """Parsed JSON URL list column."""

    state: StoredListState
    urls: tuple[str, ...] = ()
    error: Optional[str] = None

    @classmethod
    def parse(cls, raw: Any) -> "StoredUrlList":
        """
        Classify a raw column value.

        Accepts None, str, bytes (UTF-8) or an already decoded list.
        Never raises.
        """
        if raw is None:
            return cls(StoredListState.ABSENT)

        if isinstance(raw, (bytes, bytearray)):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                return cls(StoredListState.MALFORMED, error=f"not UTF-8: {e}")

        if isinstance(raw, str):
            if not raw.strip():
                return cls(StoredListState.ABSENT)
            try:
                raw = json.loads(raw)
            except ValueError as e:
                return cls(StoredListState.MALFORMED, error=f"invalid JSON: {e}")

        if not isinstance(raw, list):
            return cls(StoredListState.MALFORMED, error=f"expected list, got {type(raw).__name__}")
        if not all(isinstance(item, str) for item in raw):
            return cls(StoredListState.MALFORMED, error="list contains non-string entries")

        return cls(StoredListState.VALID, urls=tuple(raw))

    def to_list(self) -> list[str]:
        """URLs for a response; absent and malformed values give []."""
        return list(self.urls)


def load_url_list(raw: Any, *, record_id: Optional[int] = None, field: str = "urls") -> list[str]:
    """Parse a stored URL list column, logging malformed values."""
    parsed = StoredUrlList.parse(raw)
    if parsed.state is StoredListState.MALFORMED:
        logger.warning(
            "Malformed stored URL list, returning empty list",
            extra={"record_id": record_id, "field": field, "error": parsed.error},
        )
    return parsed.to_list()
