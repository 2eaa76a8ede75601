"""CLI command implementations"""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Annotated, Optional

import typer

from docdoc.config import Settings, load_config
from docdoc.core.metadata import load_override
from docdoc.core.models import Dialect
from docdoc.core.pipeline import run_build
from docdoc.core.theme import load_theme
from docdoc.errors import DocdocError
from docdoc.util.logging import configure_logging


def _fail(msg: str, cause: BaseException = None) -> None:
    """Print an error and its chain of causes to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    while cause is not None:
        typer.echo(f"Caused by: {cause}", err=True)
        cause = cause.__cause__
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def build_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to convert")],
    out: Annotated[Optional[str], typer.Argument(help="Output directory (default: dist)")] = None,
    theme: Annotated[Optional[str], typer.Option("--theme", help="Theme directory")] = None,
    template: Annotated[Optional[str], typer.Option("--template", help="Template within the theme")] = None,
    extra: Annotated[Optional[list[str]], typer.Option(
        "--extra-metadata", "-e", help="Extra YAML metadata; prefix with @ to load a YAML file")] = None,
    preserve: Annotated[bool, typer.Option(
        "--preserve-first-component", "-p",
        help="Don't strip the first component of the document path (needed for top-level files like README.md)")] = False,
    gfm: Annotated[bool, typer.Option("--gfm", help="Use GitHub Flavored Markdown")] = False,
    heading_ids: Annotated[bool, typer.Option("--heading-ids", help="Generate heading ids (with --gfm)")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    log_json: Annotated[bool, typer.Option("--log-json", help="Log as JSON lines")] = False,
    ):
    """Generate a themed HTML document from a Markdown file."""
    settings = _settings(overrides={
        "output_dir": out, "theme": theme, "template": template,
        "dialect": Dialect.gfm if gfm else None,
        "preserve_first_component": preserve or None,
        "heading_ids": heading_ids or None,
        "verbose": verbose or None, "log_json": log_json or None,
    })
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    try:
        overrides = [load_override(fragment) for fragment in extra or []]
        loaded = load_theme(Path(settings.theme))
        doc = run_build(
            Path(path),
            Path(settings.output_dir),
            loaded,
            settings.template,
            dialect=settings.dialect,
            skip_first_segment=not settings.preserve_first_component,
            overrides=overrides,
            heading_ids=settings.heading_ids,
        )
    except DocdocError as e:
        _fail(str(e), e.__cause__)
    typer.echo(f"  {path} -> {doc.path}")


def theme_cmd(
    path: Annotated[str, typer.Argument(help="Theme directory")],
    ):
    """Validate a theme and list its assets and metadata keys."""
    try:
        loaded = load_theme(Path(path))
    except DocdocError as e:
        _fail(str(e), e.__cause__)
    typer.echo(f"Theme: {loaded.name}")
    typer.echo("Assets:")
    for asset in loaded.assets:
        typer.echo(f"  {asset}")
    typer.echo("Metadata:")
    for key, value in loaded.metadata.items():
        typer.echo(f"  {key}: {value!r}")


def version_cmd():
    """Show version."""
    try:
        current = version("docdoc")
    except PackageNotFoundError:
        current = "unknown"
    typer.echo(f"docdoc {current}")
