"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdmigrate.config import Settings, load_config
from mdmigrate.core.infer import format_date, infer_metadata
from mdmigrate.core.pipeline import discover_sources, iter_migrate, read_source


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def migrate_cmd(
    source: Annotated[Optional[str], typer.Option("--source-dir", help="Root of the legacy posts")] = None,
    dest: Annotated[Optional[str], typer.Option("--dest-dir", help="Root of the migrated slug directories")] = None,
    index: Annotated[Optional[str], typer.Option("--index-name", help="File name written in each slug directory")] = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Report what would be written without writing")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Only print the summary line")] = False,
    ):
    """Migrate every markdown post under the source root into <dest>/<slug>/index.md."""
    settings = _settings(overrides={"source_dir": source, "dest_dir": dest, "index_name": index})

    try:
        files = discover_sources(settings)
    except FileNotFoundError as e:
        _fail(str(e))
    if not files:
        typer.echo(f"No markdown files found in {settings.source_dir}.")
        raise typer.Exit(0)

    verb = "Would migrate" if dry_run else "Migrated"
    count = 0
    try:
        for result in iter_migrate(settings, files, dry_run=dry_run):
            if result.overwrote is not None:
                typer.echo(
                    f"Warning: {result.source.as_posix()} and {result.overwrote.as_posix()} "
                    f"share slug '{result.slug}'; the later file wins",
                    err=True,
                )
            if not quiet:
                typer.echo(f"{verb}: {result.source.as_posix()} -> {result.destination.as_posix()}")
            count += 1
    except RuntimeError as e:
        _fail(str(e))
    typer.echo(f"{verb} {count} file(s) to {settings.dest_dir}/")


def inspect_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file to inspect", exists=True, dir_okay=False)],
    source: Annotated[Optional[str], typer.Option("--source-dir", help="Root the tags are derived from")] = None,
    ):
    """Print the metadata inferred for a single post as JSON, without writing anything."""
    settings = _settings(overrides={"source_dir": source})
    root = Path(settings.source_dir)
    if not path.absolute().is_relative_to(root.absolute()):
        root = path.parent
    try:
        doc = read_source(path, root)
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Could not read {path}", e)
    meta = infer_metadata(doc, description_length=settings.description_length)
    data = meta.model_dump()
    data["date"] = format_date(meta.date)
    data["destination"] = (Path(settings.dest_dir) / meta.slug / settings.index_name).as_posix()
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
