"""Line-oriented codec for the bookmarks file.

Each series takes exactly three lines, in recency order::

    <series name>
    <absolute directory path>
    <current episode>

There is no header, no separator and no escaping, so a field can never
contain a line break.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from bookmarker.errors import InvalidFieldError, StoreFormatError
from bookmarker.model import BookmarkRecord

log = logging.getLogger(__name__)

LINES_PER_RECORD = 3


def check_field(value: str, what: str) -> None:
    """Raise InvalidFieldError if *value* cannot be stored as one UTF-8 line."""
    if "\n" in value or "\r" in value:
        raise InvalidFieldError(f"{what} must not contain a line break: {value!r}")
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        # Undecodable file names reach us as lone surrogates (\udcXX).
        raise InvalidFieldError(f"{what} is not valid UTF-8: {value!r}") from None


def _split_lines(text: str) -> list[str]:
    # Only "\n" ends a line; str.splitlines() also breaks on \x1c, \u2028 and others.
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_bookmarks(text: str, path: str | None = None) -> list[BookmarkRecord]:
    """Decode the bookmarks file contents into records, most recent first."""
    lines = _split_lines(text)
    if len(lines) % LINES_PER_RECORD:
        raise StoreFormatError(
            f"expected {LINES_PER_RECORD} lines per series, got {len(lines)} lines in total",
            path,
        )

    records: list[BookmarkRecord] = []
    seen: set[str] = set()
    for start in range(0, len(lines), LINES_PER_RECORD):
        name, directory, episode = lines[start : start + LINES_PER_RECORD]
        if not name:
            raise StoreFormatError(f"empty series name on line {start + 1}", path)
        if name in seen:
            raise StoreFormatError(f"duplicate series {name!r} on line {start + 1}", path)
        seen.add(name)
        records.append(BookmarkRecord(name, directory, episode))
    return records


def format_bookmarks(records: Iterable[BookmarkRecord]) -> str:
    """Encode records, one three-line group each, every line newline-terminated."""
    out: list[str] = []
    for rec in records:
        for value, what in (
            (rec.series_name, "series name"),
            (rec.directory_path, "directory path"),
            (rec.current_episode, "episode"),
        ):
            check_field(value, what)
            out.append(value + "\n")
    return "".join(out)


def read_bookmarks(path: str | Path) -> list[BookmarkRecord]:
    """Read a bookmarks file; an absent file is an empty store."""
    p = Path(path)
    if not p.is_file():
        log.debug("No bookmarks file at %s, starting empty", p)
        return []
    return parse_bookmarks(p.read_text(encoding="utf-8"), path=str(p))


def write_bookmarks(path: str | Path, records: Iterable[BookmarkRecord]) -> None:
    """Rewrite the bookmarks file in full, replacing it atomically."""
    p = Path(path)
    text = format_bookmarks(records)
    p.parent.mkdir(parents=True, exist_ok=True)
    tmp = p.with_name(p.name + ".tmp")
    try:
        tmp.write_text(text, encoding="utf-8", newline="\n")
        tmp.replace(p)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise
    log.debug("Wrote %d bytes to %s", len(text.encode("utf-8")), p)
