"""Exceptions raised by the store and navigation layers."""

from __future__ import annotations


class BookmarkError(Exception):
    """Base class for every error the CLI reports as ``Error: ...``."""


class SeriesNotFoundError(BookmarkError, LookupError):
    def __init__(self, name: str | None) -> None:
        self.name = name
        if name is None:
            super().__init__("No series is being bookmarked")
        else:
            super().__init__(f"{name} ain't no series I ever heard of!")


class SeriesExistsError(BookmarkError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"The series {name} is already being bookmarked")


class EmptyDirectoryError(BookmarkError):
    def __init__(self, directory: str) -> None:
        self.directory = directory
        super().__init__(f"There's nothing to bookmark in {directory}")


class EpisodeMissingError(BookmarkError):
    """The bookmarked episode is no longer present in the series directory."""

    def __init__(self, series_name: str, episode: str) -> None:
        self.series_name = series_name
        self.episode = episode
        super().__init__(f"{episode} is no longer in the directory of {series_name}")


class StoreFormatError(BookmarkError, ValueError):
    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class InvalidFieldError(BookmarkError, ValueError):
    """A name, path or episode that the bookmarks file cannot hold."""
