"""Episode enumeration for a series directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from bookmarker.config import SUBTITLE_EXTENSIONS

log = logging.getLogger(__name__)


def is_episode_file(name: str) -> bool:
    """Return False for subtitle sidecars, True for anything else."""
    return Path(name).suffix.lower() not in SUBTITLE_EXTENSIONS


def list_episodes(directory: str | Path) -> list[str]:
    """List every episode under *directory*, recursively, in byte order.

    Identifiers are paths relative to *directory* using ``/`` separators,
    e.g. ``Season 1/S01E01.mkv``.  A missing or empty directory yields an
    empty list.
    """
    root = Path(directory)
    if not root.is_dir():
        log.debug("Not a directory: %s", root)
        return []

    episodes: list[str] = []
    for p in root.rglob("*"):
        if not p.is_file() or not is_episode_file(p.name):
            continue
        episodes.append(p.relative_to(root).as_posix())

    episodes.sort(key=os.fsencode)
    log.debug("Found %d episodes in %s", len(episodes), root)
    return episodes
