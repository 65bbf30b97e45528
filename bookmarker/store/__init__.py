"""Persistent bookmark store and its on-disk codec."""

from bookmarker.store.bookmarks import BookmarkStore
from bookmarker.store.codec import (
    format_bookmarks,
    parse_bookmarks,
    read_bookmarks,
    write_bookmarks,
)

__all__ = [
    "BookmarkStore",
    "format_bookmarks",
    "parse_bookmarks",
    "read_bookmarks",
    "write_bookmarks",
]
