"""Tests for CLI commands via subprocess."""

import os
import shlex
import subprocess
import sys
from pathlib import Path

import pytest

from builders import build_series_dir

PYTHON = sys.executable


@pytest.fixture
def run(bookmarks_file: Path, tmp_path: Path):
    """Run ``python -m bookmarker.cli`` against an isolated bookmarks file."""
    env = dict(os.environ)
    env["EPISODE_BOOKMARKS_FILE"] = str(bookmarks_file)
    env["HOME"] = str(tmp_path / "home")
    env.pop("EPISODE_BOOKMARKER_PLAYER", None)

    def _run(*args: str) -> subprocess.CompletedProcess:
        return subprocess.run(
            [PYTHON, "-m", "bookmarker.cli", *args],
            capture_output=True,
            text=True,
            timeout=60,
            env=env,
        )

    return _run


def _ok(result: subprocess.CompletedProcess) -> list[str]:
    assert result.returncode == 0, f"stderr: {result.stderr}"
    return result.stdout.splitlines()


class TestStart:
    def test_start_bookmarks_first_episode(self, run, show_dir, bookmarks_file) -> None:
        out = _ok(run("start", str(show_dir)))
        assert out == [
            "Now bookmarking Show",
            "The bookmark is set to the first episode: ep1.mp4",
        ]
        assert _ok(run("list")) == ["Show"]
        assert bookmarks_file.read_text(encoding="utf-8") == (
            f"Show\n{show_dir.resolve()}\nep1.mp4\n"
        )

    def test_multi_word_name(self, run, show_dir) -> None:
        _ok(run("start", str(show_dir), "My", "Great", "Show"))
        assert _ok(run("list")) == ["My Great Show"]

    def test_already_tracked(self, run, show_dir) -> None:
        _ok(run("start", str(show_dir)))
        result = run("start", str(show_dir))
        assert result.returncode == 1
        assert "already being bookmarked" in result.stderr

    def test_empty_directory(self, run, tmp_path) -> None:
        empty = build_series_dir(tmp_path / "Empty", ["only.srt"])
        result = run("start", str(empty))
        assert result.returncode == 1
        assert "nothing to bookmark" in result.stderr
        assert _ok(run("list")) == []

    def test_not_a_directory(self, run, tmp_path) -> None:
        result = run("start", str(tmp_path / "missing"))
        assert result.returncode == 1
        assert "is not a directory" in result.stderr

    def test_missing_path_argument(self, run) -> None:
        result = run("start")
        assert result.returncode == 1
        assert "Usage:" in result.stderr


class TestNavigation:
    def test_next_and_prev_use_most_recent_series(self, run, show_dir) -> None:
        _ok(run("start", str(show_dir)))

        assert _ok(run("prev")) == ["ep1.mp4 is the first episode of Show"]
        assert _ok(run("next")) == ["Advancing bookmark to ep2.mp4"]
        assert _ok(run("next")) == ["Advancing bookmark to ep3.mp4"]
        assert _ok(run("next")) == ["ep3.mp4 is the last episode of Show"]
        assert _ok(run("prev", "Show")) == ["Moving bookmark back to ep2.mp4"]

    def test_progress(self, run, show_dir) -> None:
        _ok(run("start", str(show_dir)))
        _ok(run("next"))
        assert _ok(run("progress")) == [
            "Show:",
            "    ep1.mp4",
            " -> ep2.mp4",
            "    ep3.mp4",
            "Current episode: ep2.mp4 (2 of 3)",
        ]

    def test_vanished_episode(self, run, show_dir) -> None:
        _ok(run("start", str(show_dir)))
        (show_dir / "ep1.mp4").unlink()
        result = run("next")
        assert result.returncode == 1
        assert "no longer in the directory" in result.stderr

    def test_play_with_custom_player(self, run, show_dir, tmp_path) -> None:
        _ok(run("start", str(show_dir)))
        _ok(run("start", str(show_dir), "Other"))
        player = shlex.join([PYTHON, "-c", "pass"])
        assert _ok(run("play", "Show", "--player", player)) == ["Playing ep1.mp4"]
        assert _ok(run("list")) == ["Show", "Other"]


class TestRecency:
    def test_list_is_most_recent_first(self, run, tmp_path) -> None:
        for name in ("A", "B", "C"):
            _ok(run("start", str(build_series_dir(tmp_path / name, ["e1.mkv", "e2.mkv"]))))
        assert _ok(run("list")) == ["C", "B", "A"]

        _ok(run("next", "A"))
        assert _ok(run("list")) == ["A", "C", "B"]

        _ok(run("finish", "C"))
        assert _ok(run("list")) == ["A", "B"]

    def test_metacharacter_names_are_literal(self, run, show_dir) -> None:
        _ok(run("start", str(show_dir), "Show"))
        _ok(run("start", str(show_dir), "S.ow"))
        _ok(run("next", "S.ow"))
        assert _ok(run("progress", "Show"))[-1] == "Current episode: ep1.mp4 (1 of 3)"
        assert _ok(run("progress", "S.ow"))[-1] == "Current episode: ep2.mp4 (2 of 3)"

    def test_progress_and_play_move_series_to_front(self, run, tmp_path) -> None:
        for name in ("A", "B", "C"):
            _ok(run("start", str(build_series_dir(tmp_path / name, ["e1.mkv", "e2.mkv"]))))

        _ok(run("progress", "A"))
        assert _ok(run("list")) == ["A", "C", "B"]

        _ok(run("play", "B", "--player", shlex.join([PYTHON, "-c", "pass"])))
        assert _ok(run("list")) == ["B", "A", "C"]

    def test_finish_keeps_order_of_the_rest(self, run, tmp_path) -> None:
        for name in ("A", "B", "C", "D"):
            _ok(run("start", str(build_series_dir(tmp_path / name, ["e1.mkv"]))))
        _ok(run("finish", "B"))
        assert _ok(run("list")) == ["D", "C", "A"]

    def test_progress_and_finish_default_to_most_recent(self, run, tmp_path) -> None:
        for name in ("A", "B"):
            _ok(run("start", str(build_series_dir(tmp_path / name, ["e1.mkv", "e2.mkv"]))))
        _ok(run("next", "A"))

        assert _ok(run("progress"))[0] == "A:"
        assert _ok(run("finish")) == ["Removing bookmark for A"]
        assert _ok(run("list")) == ["B"]

    def test_name_starting_with_dash(self, run, show_dir) -> None:
        _ok(run("start", str(show_dir), "-1-"))
        assert _ok(run("next", "-1-")) == ["Advancing bookmark to ep2.mp4"]
        assert _ok(run("list")) == ["-1-"]


class TestErrors:
    def test_finish_unknown_leaves_file_untouched(self, run, show_dir, bookmarks_file) -> None:
        _ok(run("start", str(show_dir)))
        before = bookmarks_file.read_bytes()
        result = run("finish", "Nope")
        assert result.returncode == 1
        assert "Nope" in result.stderr
        assert bookmarks_file.read_bytes() == before

    def test_empty_store_without_name(self, run) -> None:
        result = run("next")
        assert result.returncode == 1
        assert "No series is being bookmarked" in result.stderr

    def test_store_created_on_first_run(self, run, bookmarks_file) -> None:
        assert _ok(run("list")) == []
        assert bookmarks_file.read_bytes() == b""

    def test_no_verb_prints_usage(self, run) -> None:
        result = run()
        assert result.returncode == 1
        assert "Usage:" in result.stderr

    def test_unknown_verb(self, run) -> None:
        result = run("rewind")
        assert result.returncode == 1
        assert "Usage:" in result.stderr

    def test_line_break_in_name(self, run, show_dir, bookmarks_file) -> None:
        result = run("start", str(show_dir), "Two\nLines")
        assert result.returncode == 1
        assert result.stderr.startswith("Error:")
        assert "line break" in result.stderr
        assert bookmarks_file.read_bytes() == b""

    def test_name_cannot_be_inferred_from_root(self, run) -> None:
        result = run("start", "/")
        assert result.returncode == 1
        assert result.stderr.startswith("Error:")
        assert "cannot infer a series name" in result.stderr

    @pytest.mark.skipif(not sys.platform.startswith("linux"), reason="needs byte file names")
    def test_undecodable_file_name(self, run, tmp_path, bookmarks_file) -> None:
        series = tmp_path / "Raw"
        series.mkdir()
        (series / os.fsdecode(b"ep\xff1.mkv")).write_bytes(b"")

        result = run("start", str(series))
        assert result.returncode == 1
        assert result.stderr.startswith("Error:")
        assert "not valid UTF-8" in result.stderr
        assert bookmarks_file.read_bytes() == b""
        assert not bookmarks_file.with_name(bookmarks_file.name + ".tmp").exists()
