from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class BookmarkRecord:
    series_name: str
    directory_path: str  # absolute, resolved once at creation
    current_episode: str  # relative to directory_path, "/"-separated


@dataclass(slots=True)
class Step:
    """Outcome of moving a bookmark one episode forward or back."""

    episode: str
    previous: str
    at_boundary: bool = False


@dataclass(slots=True)
class Progress:
    series_name: str
    listing: list[tuple[str, bool]]
    index: int  # 1-based position of the current episode
    total: int

    @property
    def current_episode(self) -> str:
        return self.listing[self.index - 1][0]
