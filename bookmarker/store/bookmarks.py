"""In-memory bookmark store with most-recently-used ordering."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from bookmarker.errors import InvalidFieldError, SeriesExistsError, SeriesNotFoundError
from bookmarker.model import BookmarkRecord
from bookmarker.store.codec import check_field, read_bookmarks, write_bookmarks

log = logging.getLogger(__name__)


class BookmarkStore:
    """Ordered series bookmarks, most recently used first.

    Lookups compare series names with plain string equality, so names may
    contain any character except a line break.  Mutations only touch the
    in-memory list; call :meth:`save` to persist them.
    """

    __slots__ = ("_records",)

    def __init__(self, records: list[BookmarkRecord] | None = None) -> None:
        self._records: list[BookmarkRecord] = list(records or [])

    # -- persistence --

    @classmethod
    def load(cls, path: str | Path) -> BookmarkStore:
        """Read the store from *path*; a missing file gives an empty store."""
        store = cls(read_bookmarks(path))
        log.debug("Loaded %d bookmarks from %s", len(store), path)
        return store

    def save(self, path: str | Path) -> None:
        """Rewrite *path* with the current records."""
        write_bookmarks(path, self._records)

    # -- queries --

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[BookmarkRecord]:
        return iter(list(self._records))

    @property
    def records(self) -> list[BookmarkRecord]:
        return list(self._records)

    def _index(self, name: str) -> int:
        for i, rec in enumerate(self._records):
            if rec.series_name == name:
                return i
        raise SeriesNotFoundError(name)

    def exists(self, name: str) -> bool:
        return any(rec.series_name == name for rec in self._records)

    def get(self, name: str) -> BookmarkRecord:
        return self._records[self._index(name)]

    def list_names(self) -> list[str]:
        return [rec.series_name for rec in self._records]

    def most_recently_used(self) -> str | None:
        return self._records[0].series_name if self._records else None

    # -- mutations --

    def create(self, name: str, directory_path: str, first_episode: str) -> BookmarkRecord:
        """Start tracking *name*; the new record becomes the most recently used."""
        if not name:
            raise InvalidFieldError("series name must not be empty")
        check_field(name, "series name")
        check_field(directory_path, "directory path")
        check_field(first_episode, "episode")
        if self.exists(name):
            raise SeriesExistsError(name)
        rec = BookmarkRecord(name, directory_path, first_episode)
        self._records.insert(0, rec)
        log.debug("Created bookmark %r -> %s", name, first_episode)
        return rec

    def delete(self, name: str) -> BookmarkRecord:
        rec = self._records.pop(self._index(name))
        log.debug("Deleted bookmark %r", name)
        return rec

    def update_current_episode(self, name: str, new_episode: str) -> BookmarkRecord:
        check_field(new_episode, "episode")
        rec = self.get(name)
        rec.current_episode = new_episode
        return rec

    def touch(self, name: str) -> BookmarkRecord:
        """Move *name* to the front of the recency order."""
        idx = self._index(name)
        rec = self._records[idx]
        if idx:
            del self._records[idx]
            self._records.insert(0, rec)
        return rec
