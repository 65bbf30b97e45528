"""Episode bookmarker — remembers where you left off in a series."""

__version__ = "0.1.0"
