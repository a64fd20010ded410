"""API utility helpers."""

from .sql_safety import escape_like_pattern, like_contains
from .stored_lists import StoredListState, StoredUrlList, load_url_list

__all__ = [
    "escape_like_pattern",
    "like_contains",
    "StoredListState",
    "StoredUrlList",
    "load_url_list",
]
