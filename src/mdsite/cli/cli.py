"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdsite.cli.commands import build_cmd, list_cmd, tags_cmd


app = typer.Typer(name="mdsite", no_args_is_help=True, help="Static site generator for key=value + markdown posts")

app.command(name="build")(build_cmd)
app.command(name="list")(list_cmd)
app.command(name="tags")(tags_cmd)
