"""Hand an episode file to the desktop's default media player."""

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
import sys
from pathlib import Path

log = logging.getLogger(__name__)


def default_opener() -> list[str] | None:
    """Return the command that opens a file with its default application."""
    if sys.platform == "darwin":
        candidate = "open"
    else:
        candidate = "xdg-open"
    found = shutil.which(candidate)
    if found:
        return [found]
    return None


def player_command(player: str | None) -> list[str] | None:
    """Split a user-supplied player command line, or fall back to the OS opener."""
    if player:
        return shlex.split(player)
    return default_opener()


def launch(path: str | Path, player: str | None = None) -> None:
    """Start playing *path* without waiting for the player to exit.

    The player runs in its own session with all standard streams on
    ``/dev/null``; its exit status is never checked.
    """
    target = Path(path)
    if not target.is_file():
        raise FileNotFoundError(f"No such episode file: {target}")

    if not player and sys.platform == "win32":
        log.debug("os.startfile(%s)", target)
        os.startfile(str(target))  # type: ignore[attr-defined]
        return

    cmd = player_command(player)
    if not cmd:
        raise RuntimeError("No default application launcher found. Install xdg-utils or pass --player.")

    log.debug("Launching %s", " ".join(cmd + [str(target)]))
    subprocess.Popen(
        [*cmd, str(target)],
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )
