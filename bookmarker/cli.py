"""episode-bookmarker CLI — keeps track of watched episodes."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import NoReturn

import click
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from bookmarker.config import BOOKMARKS_FILE_ENV, PLAYER_ENV, default_bookmarks_path
from bookmarker.errors import BookmarkError, EpisodeMissingError, SeriesNotFoundError
from bookmarker.navigation import advance, episode_path, progress, retreat, start_series
from bookmarker.player import launch
from bookmarker.report import progress_report, usage_text
from bookmarker.store import BookmarkStore

PROG_NAME = "episode-bookmarker"

app = typer.Typer(name=PROG_NAME, help="Keeps track of watched episodes", add_completion=False)
console = Console(stderr=True)

NAME_HELP = "Series name; defaults to the most recently used series"
# Series names are free text, so words like "-1-" must reach the name argument.
_NAME_ARGS = {"ignore_unknown_options": True}


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)
    raise typer.Exit(1)


@contextmanager
def _reporting_errors() -> Iterator[None]:
    """Turn domain errors into an ``Error:`` line and exit status 1."""
    try:
        yield
    except BookmarkError as e:
        _fail(str(e))


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False, show_time=False)],
    )


def _bookmarks_file(ctx: typer.Context) -> Path:
    return ctx.obj


def _resolve_name(store: BookmarkStore, words: list[str] | None) -> str:
    """Join the trailing words into a name, or fall back to the most recent series."""
    if words:
        name = " ".join(words)
    else:
        name = store.most_recently_used()
        if name is None:
            raise SeriesNotFoundError(None)
    if not store.exists(name):
        raise SeriesNotFoundError(name)
    return name


@app.callback(invoke_without_command=True)
def _root(
    ctx: typer.Context,
    bookmarks_file: Path = typer.Option(
        None,
        "--bookmarks-file",
        envvar=BOOKMARKS_FILE_ENV,
        help="Bookmarks file (default: ~/.episode_bookmarks)",
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log debug output to stderr"),
):
    """Keeps track of watched episodes."""
    _configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        typer.echo(usage_text(PROG_NAME), err=True)
        raise typer.Exit(1)

    path = (bookmarks_file or default_bookmarks_path()).expanduser()
    with _reporting_errors():
        if not path.exists():
            BookmarkStore().save(path)
    ctx.obj = path


@app.command(context_settings=_NAME_ARGS)
def start(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Directory holding the series' episode files"),
    name: list[str] = typer.Argument(None, help="Series name; defaults to the directory name"),
):
    """Start bookmarking a series whose files are in the given directory."""
    bookmarks = _bookmarks_file(ctx)
    directory = Path(path).expanduser().resolve()
    if not directory.is_dir():
        _fail(f"{directory} is not a directory")

    with _reporting_errors():
        store = BookmarkStore.load(bookmarks)
        record = start_series(store, directory, " ".join(name) if name else None)
        store.save(bookmarks)

    typer.echo(f"Now bookmarking {record.series_name}")
    typer.echo(f"The bookmark is set to the first episode: {record.current_episode}")


@app.command(context_settings=_NAME_ARGS)
def finish(
    ctx: typer.Context,
    name: list[str] = typer.Argument(None, help=NAME_HELP),
):
    """Remove the bookmark for the series."""
    bookmarks = _bookmarks_file(ctx)
    with _reporting_errors():
        store = BookmarkStore.load(bookmarks)
        series = _resolve_name(store, name)
        store.delete(series)
        store.save(bookmarks)
    typer.echo(f"Removing bookmark for {series}")


@app.command(context_settings=_NAME_ARGS)
def play(
    ctx: typer.Context,
    name: list[str] = typer.Argument(None, help=NAME_HELP),
    player: str = typer.Option(
        None,
        "--player",
        envvar=PLAYER_ENV,
        help="Player command line (default: the system's default application)",
    ),
):
    """Play the currently bookmarked episode."""
    bookmarks = _bookmarks_file(ctx)
    with _reporting_errors():
        store = BookmarkStore.load(bookmarks)
        series = _resolve_name(store, name)
        record = store.get(series)
        episode_file = episode_path(record)
        if not episode_file.is_file():
            raise EpisodeMissingError(series, record.current_episode)

        typer.echo(f"Playing {record.current_episode}")
        try:
            launch(episode_file, player=player)
        except (RuntimeError, OSError) as e:
            _fail(str(e))

        store.touch(series)
        store.save(bookmarks)


@app.command(name="next", context_settings=_NAME_ARGS)
def next_cmd(
    ctx: typer.Context,
    name: list[str] = typer.Argument(None, help=NAME_HELP),
):
    """Advance the bookmark to the next episode."""
    bookmarks = _bookmarks_file(ctx)
    with _reporting_errors():
        store = BookmarkStore.load(bookmarks)
        series = _resolve_name(store, name)
        step = advance(store, series)
        store.touch(series)
        store.save(bookmarks)

    if step.at_boundary:
        typer.echo(f"{step.episode} is the last episode of {series}")
    else:
        typer.echo(f"Advancing bookmark to {step.episode}")


@app.command(name="prev", context_settings=_NAME_ARGS)
def prev_cmd(
    ctx: typer.Context,
    name: list[str] = typer.Argument(None, help=NAME_HELP),
):
    """Move the bookmark back to the previous episode."""
    bookmarks = _bookmarks_file(ctx)
    with _reporting_errors():
        store = BookmarkStore.load(bookmarks)
        series = _resolve_name(store, name)
        step = retreat(store, series)
        store.touch(series)
        store.save(bookmarks)

    if step.at_boundary:
        typer.echo(f"{step.episode} is the first episode of {series}")
    else:
        typer.echo(f"Moving bookmark back to {step.episode}")


@app.command(name="progress", context_settings=_NAME_ARGS)
def progress_cmd(
    ctx: typer.Context,
    name: list[str] = typer.Argument(None, help=NAME_HELP),
):
    """Show how much of the series you've watched."""
    bookmarks = _bookmarks_file(ctx)
    with _reporting_errors():
        store = BookmarkStore.load(bookmarks)
        series = _resolve_name(store, name)
        report = progress_report(progress(store.get(series)))
        store.touch(series)
        store.save(bookmarks)
    typer.echo(report)


@app.command(name="list")
def list_cmd(ctx: typer.Context):
    """List the series being bookmarked, most recently used first."""
    with _reporting_errors():
        store = BookmarkStore.load(_bookmarks_file(ctx))
    for series in store.list_names():
        typer.echo(series)


def main() -> None:
    """Console entry point; every usage or domain error exits with status 1."""
    try:
        rv = app(prog_name=PROG_NAME, standalone_mode=False)
    except click.UsageError as e:
        typer.echo(f"Error: {e.format_message()}", err=True)
        typer.echo(usage_text(PROG_NAME), err=True)
        sys.exit(1)
    except click.ClickException as e:
        e.show()
        sys.exit(1)
    except click.Abort:
        typer.echo("Aborted!", err=True)
        sys.exit(1)
    sys.exit(rv if isinstance(rv, int) else 0)


if __name__ == "__main__":
    main()
