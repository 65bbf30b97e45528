"""Plain-text rendering for terminal output."""

from __future__ import annotations

from bookmarker.model import Progress

CURRENT_MARKER = " -> "
INDENT = "    "


def progress_report(prog: Progress) -> str:
    """Render the episode listing with the current episode marked.

    Example::

        Show:
            ep1.mp4
         -> ep2.mp4
            ep3.mp4
        Current episode: ep2.mp4 (2 of 3)
    """
    lines = [f"{prog.series_name}:"]
    for episode, is_current in prog.listing:
        lines.append((CURRENT_MARKER if is_current else INDENT) + episode)
    lines.append(f"Current episode: {prog.current_episode} ({prog.index} of {prog.total})")
    return "\n".join(lines)


_VERBS: list[tuple[str, str]] = [
    ("start path/to/series [series_name]", "Start bookmarking a series whose files are in the given directory"),
    ("finish [series_name]", "Remove bookmark for the series"),
    ("play [series_name]", "Play the currently bookmarked episode"),
    ("next [series_name]", "Advance the bookmark to the next episode"),
    ("prev [series_name]", "Move the bookmark back to the previous episode"),
    ("progress [series_name]", "Show how much of the series you've watched"),
    ("list", "List the series being bookmarked"),
]


def usage_text(prog_name: str) -> str:
    """Usage summary printed for missing or unknown verbs."""
    lines = ["Usage:"]
    for synopsis, summary in _VERBS:
        lines.append(f"{prog_name} {synopsis}")
        lines.append(f"\t{summary}")
        lines.append("")
    lines.append("The series_name can be omitted.")
    lines.append("For start, the name is inferred from the path (e.g. path/to/series -> series).")
    lines.append("For the rest, the series will be the most recently used one.")
    lines.append("Spaces in the series_name need not be escaped or quoted.")
    return "\n".join(lines)
