"""Moving a series bookmark through its episode list."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from bookmarker.episodes import list_episodes
from bookmarker.errors import (
    EmptyDirectoryError,
    EpisodeMissingError,
    InvalidFieldError,
    SeriesExistsError,
)
from bookmarker.model import BookmarkRecord, Progress, Step
from bookmarker.store import BookmarkStore

log = logging.getLogger(__name__)

EpisodeLister = Callable[[str], list[str]]


def start_series(
    store: BookmarkStore,
    directory: str | Path,
    name: str | None = None,
    lister: EpisodeLister = list_episodes,
) -> BookmarkRecord:
    """Begin bookmarking *directory* at its first episode.

    The directory is resolved once here; later commands use the stored
    absolute path as-is.  When *name* is omitted it is taken from the
    directory's final path segment.
    """
    path = Path(directory).resolve()
    if not name:
        name = path.name
    if not name:
        raise InvalidFieldError(f"cannot infer a series name from {path}; pass one explicitly")
    if store.exists(name):
        raise SeriesExistsError(name)

    episodes = lister(str(path))
    if not episodes:
        raise EmptyDirectoryError(str(path))

    log.info("Bookmarking %r at %s", name, path)
    return store.create(name, str(path), episodes[0])


def _locate(record: BookmarkRecord, episodes: list[str]) -> int:
    try:
        return episodes.index(record.current_episode)
    except ValueError:
        raise EpisodeMissingError(record.series_name, record.current_episode) from None


def _step(store: BookmarkStore, name: str, offset: int, lister: EpisodeLister) -> Step:
    record = store.get(name)
    episodes = lister(record.directory_path)
    idx = _locate(record, episodes)
    target = idx + offset
    current = record.current_episode
    if target < 0 or target >= len(episodes):
        return Step(episode=current, previous=current, at_boundary=True)

    store.update_current_episode(name, episodes[target])
    log.debug("Moved %r from %s to %s", name, current, episodes[target])
    return Step(episode=episodes[target], previous=current)


def advance(store: BookmarkStore, name: str, lister: EpisodeLister = list_episodes) -> Step:
    """Move the bookmark to the next episode; no-op at the last one."""
    return _step(store, name, 1, lister)


def retreat(store: BookmarkStore, name: str, lister: EpisodeLister = list_episodes) -> Step:
    """Move the bookmark to the previous episode; no-op at the first one."""
    return _step(store, name, -1, lister)


def progress(record: BookmarkRecord, lister: EpisodeLister = list_episodes) -> Progress:
    """Summarise how far into the series the bookmark is. Read-only."""
    episodes = lister(record.directory_path)
    idx = _locate(record, episodes)
    return Progress(
        series_name=record.series_name,
        listing=[(ep, i == idx) for i, ep in enumerate(episodes)],
        index=idx + 1,
        total=len(episodes),
    )


def episode_path(record: BookmarkRecord) -> Path:
    """Absolute path of the bookmarked episode file."""
    return Path(record.directory_path) / record.current_episode
