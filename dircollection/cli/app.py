from __future__ import annotations

import logging
import shutil
import sys
from dataclasses import replace
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from result import Err

from dircollection.collection import DirectoryCollection, InvalidStateError, MatchPath
from dircollection.config.defaults import default_config
from dircollection.config.loader import load_config, sample_config_json
from dircollection.config.schema import AppConfig
from dircollection.services.summary import render_entries

console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _load_config(path: str | None) -> AppConfig:
    config_result = load_config(path)
    if isinstance(config_result, Err):
        err_console.print(f"[yellow]{escape(config_result.unwrap_err())} Using defaults.[/]")
        return default_config()
    return config_result.unwrap()


def _cat_entry(collection: DirectoryCollection, name: str, config: AppConfig) -> None:
    try:
        stream = collection.open(name, config.match_mode)
    except OSError as exc:
        err_console.print(f"[red]Cannot open {escape(name)}: {escape(str(exc))}[/]")
        raise typer.Exit(1) from None
    if stream is None:
        err_console.print(f"[red]No file entry named {escape(name)} in {escape(collection.name)}[/]")
        raise typer.Exit(1)
    with stream:
        shutil.copyfileobj(stream, sys.stdout.buffer, config.chunk_size)
    sys.stdout.buffer.flush()


def run(
    path: Annotated[str, typer.Argument(help="Directory to collect.")] = ".",
    cat: Annotated[str | None, typer.Option("--cat", help="Write the named entry's bytes to stdout.")] = None,
    ignore_path: Annotated[
        bool, typer.Option("--ignore-path", "-I", help="Match entry names by basename only.")
    ] = False,
    recursive: Annotated[
        bool | None, typer.Option("--recursive/--no-recursive", "-r/-R", help="Descend into subdirectories.")
    ] = None,
    show_paths: Annotated[bool, typer.Option("--show-paths", "-p", help="Show filesystem paths.")] = False,
    sample_config: Annotated[bool, typer.Option("--sample-config", help="Print sample config JSON.")] = False,
    config_path: Annotated[str | None, typer.Option("--config", "-c", help="Config file to use.")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    _configure_logging(verbose)

    if sample_config:
        console.print(sample_config_json())
        raise typer.Exit(0)

    config = _load_config(config_path)
    overrides: dict[str, object] = {}
    if recursive is not None:
        overrides["recursive"] = recursive
    if ignore_path:
        overrides["match_mode"] = MatchPath.IGNORE
    if show_paths:
        overrides["show_paths"] = True
    if overrides:
        config = replace(config, **overrides)

    with DirectoryCollection(path, recursive=config.recursive) as collection:
        try:
            if cat is not None:
                _cat_entry(collection, cat, config)
                return
            render_entries(
                console,
                collection.name,
                collection.entries(),
                collection.stats(),
                show_paths=config.show_paths,
            )
        except InvalidStateError:
            err_console.print(f"[red]Not a directory: {escape(path)}[/]")
            raise typer.Exit(1) from None


def cli() -> None:
    typer.run(run)


if __name__ == "__main__":
    cli()
