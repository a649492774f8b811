"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdmigrate.cli.commands import inspect_cmd, migrate_cmd


app = typer.Typer(name="mdmigrate", no_args_is_help=True, help="Migrate legacy markdown posts into slug directories")

app.command(name="migrate")(migrate_cmd)
app.command(name="inspect")(inspect_cmd)
