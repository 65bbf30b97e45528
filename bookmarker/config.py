"""Locations and defaults shared by the CLI and the library."""

from __future__ import annotations

from pathlib import Path

# Environment overrides, read by the typer options in bookmarker.cli.
BOOKMARKS_FILE_ENV = "EPISODE_BOOKMARKS_FILE"
PLAYER_ENV = "EPISODE_BOOKMARKER_PLAYER"

BOOKMARKS_FILE_NAME = ".episode_bookmarks"

# Sidecar files that live next to episodes but are never episodes themselves.
SUBTITLE_EXTENSIONS: frozenset[str] = frozenset({".srt", ".ass", ".ssa", ".sub", ".idx", ".vtt"})


def default_bookmarks_path() -> Path:
    """Per-user store location, ``~/.episode_bookmarks``."""
    return Path.home() / BOOKMARKS_FILE_NAME
