"""Command line interface for inspecting resolved site content."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import List, Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sitecontent.config import LoaderConfig
from sitecontent.errors import AmbiguousResolutionError, InvalidRequestError
from sitecontent.loader import ContentLoader


console = Console()
app = typer.Typer(help="sitecontent - resolve real and generated site content")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _build_loader(root: Path, virtual: Optional[List[str]]) -> ContentLoader:
    loader = ContentLoader(config=LoaderConfig(root=root))
    for option in virtual or []:
        directory, sep, name = option.rpartition(":")
        if not sep or not directory or not name:
            raise typer.BadParameter(f"Expected DIR:NAME, got {option!r}", param_hint="--virtual")
        # placeholder handle, this tool never runs generators
        loader.register(directory, name, option)
    return loader


@app.command("ls")
def list_content(
    request: str = typer.Argument(".", help="Path, directory or filename glob to resolve."),
    root: Path = typer.Option(Path("."), "--root", help="Content root directory", resolve_path=True),
    recurse: bool = typer.Option(False, "--recurse", "-r", help="Descend into subdirectories"),
    virtual: Optional[List[str]] = typer.Option(
        None, "--virtual", help="Register a generated file as DIR:NAME (repeatable)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """List entries matching a request."""
    _setup_logging(verbose)
    loader = _build_loader(root, virtual)

    try:
        entries = asyncio.run(loader.contents(request, recurse=recurse))
    except InvalidRequestError as exc:
        raise typer.BadParameter(str(exc)) from exc

    if not entries:
        console.print("[yellow]No content found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Path")
    table.add_column("Kind")
    table.add_column("Ext")
    table.add_column("Config")

    for entry in entries:
        config = entry.config
        keys = ", ".join(str(key) for key in config) if isinstance(config, dict) else ""
        table.add_row(escape(entry.path), "virtual" if entry.virtual else "real", entry.record.ext, keys)

    console.print(table)


@app.command()
def show(
    path: str = typer.Argument(..., help="Single file to resolve."),
    root: Path = typer.Option(Path("."), "--root", help="Content root directory", resolve_path=True),
    virtual: Optional[List[str]] = typer.Option(
        None, "--virtual", help="Register a generated file as DIR:NAME (repeatable)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Print the config and body of one file."""
    _setup_logging(verbose)
    loader = _build_loader(root, virtual)

    async def _load():
        entry = await loader.get(path)
        if entry is None:
            return None, None
        return entry, await entry.record.read()

    try:
        entry, body = asyncio.run(_load())
    except (InvalidRequestError, AmbiguousResolutionError) as exc:
        raise typer.BadParameter(str(exc)) from exc

    if entry is None:
        console.print(f"[red]Not found: {escape(path)}[/red]")
        raise typer.Exit(code=1)

    if entry.virtual:
        console.print(
            f"[bold]{escape(entry.path)}[/bold] (virtual, generator: {escape(str(entry.generator))})",
            emoji=False,
        )
        return

    console.print(f"[bold]{escape(entry.path)}[/bold]")
    if entry.config is not None:
        console.print(yaml.safe_dump(entry.config, sort_keys=False).rstrip(), markup=False)
        console.rule()
    if body is not None:
        console.print(body, markup=False, highlight=False)
