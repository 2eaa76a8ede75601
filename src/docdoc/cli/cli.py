"""CLI entrypoint: Typer app definition and command registration"""

import typer

from docdoc.cli.commands import build_cmd, theme_cmd, version_cmd


app = typer.Typer(
    name="docdoc",
    no_args_is_help=True,
    help="Generate a themed HTML document from Markdown (CommonMark or GitHub Flavored).",
)

app.command(name="build")(build_cmd)
app.command(name="theme")(theme_cmd)
app.command(name="version")(version_cmd)
