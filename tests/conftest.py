from pathlib import Path

import pytest

from builders import build_series_dir


@pytest.fixture
def bookmarks_file(tmp_path: Path) -> Path:
    """Location for an isolated bookmarks file (not created yet)."""
    return tmp_path / "state" / ".episode_bookmarks"


@pytest.fixture
def show_dir(tmp_path: Path) -> Path:
    """A series directory with three episodes and one subtitle sidecar."""
    return build_series_dir(
        tmp_path / "media" / "Show",
        ["ep1.mp4", "ep2.mp4", "ep2.srt", "ep3.mp4"],
    )
