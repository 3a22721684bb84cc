"""Typer CLI: validate, normalize, summary commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from harlog import __version__
from harlog.config import Settings
from harlog.errors import HarDecodeError
from harlog.models.har import Log
from harlog.storage.har_file import load_har, save_har, wrap_envelope

app = typer.Typer(
    name="harlog",
    help="Validate and normalize HTTP Archive (HAR 1.2) files.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"harlog v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", "-v", help="Show version and exit.", callback=version_callback),
    ] = None,
) -> None:
    """harlog: HTTP Archive (HAR 1.2) toolkit."""
    settings = Settings.load()
    settings.configure_logging()
    ctx.obj = settings


def _load_or_exit(path: Path) -> Log:
    try:
        return load_har(path)
    except FileNotFoundError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1) from e
    except HarDecodeError as e:
        err_console.print(f"[red]Invalid HAR:[/red] {e}")
        raise typer.Exit(code=1) from e


@app.command()
def validate(
    path: Annotated[Path, typer.Argument(help="HAR file to check.")],
) -> None:
    """Check that a HAR file decodes."""
    log = _load_or_exit(path)
    console.print(
        f"[green]OK[/green] {path}: {len(log.entries)} entries, "
        f"{len(log.pages or [])} pages"
    )


@app.command()
def normalize(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="HAR file to normalize.")],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write here instead of stdout."),
    ] = None,
    emit_time: Annotated[
        Optional[bool],
        typer.Option("--emit-time/--no-emit-time", help="Add entry.time to each entry."),
    ] = None,
) -> None:
    """Decode a HAR file and write it back in canonical form."""
    settings: Settings = ctx.obj
    log = _load_or_exit(path)
    emit_entry_time = settings.emit_entry_time if emit_time is None else emit_time
    if output is None:
        data = wrap_envelope(log, indent=settings.indent, emit_entry_time=emit_entry_time)
        typer.echo(data.decode())
        return
    save_har(log, output, indent=settings.indent, emit_entry_time=emit_entry_time)
    console.print(f"[green]Wrote[/green] {output}")


@app.command()
def summary(
    path: Annotated[Path, typer.Argument(help="HAR file to summarize.")],
) -> None:
    """List the entries of a HAR file."""
    log = _load_or_exit(path)
    creator = log.creator
    table = Table(title=f"{path.name} | {creator.name} {creator.version}")
    table.add_column("#", justify="right")
    table.add_column("Method")
    table.add_column("URL", overflow="fold")
    table.add_column("Status", justify="right")
    table.add_column("Time (ms)", justify="right")
    for i, entry in enumerate(log.entries, 1):
        table.add_row(
            str(i),
            entry.request.method,
            entry.request.url,
            str(entry.response.status),
            f"{entry.total_time:g}",
        )
    console.print(table)
