"""Theme loading, template rendering, and asset copying"""

import logging
import shutil
from pathlib import Path
from typing import Any

import yaml
from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError
from pydantic import ValidationError

from docdoc.core.models import Theme, ThemeFile
from docdoc.errors import IoError, RenderError, ThemeInvalid


logger = logging.getLogger(__name__)

THEME_FILE = "theme.yml"
TEMPLATE_DIR = "templates"


def _describe(error: ValidationError) -> str:
    """Summarize pydantic errors as `key: message` pairs."""
    return "; ".join(
        f"{'.'.join(str(p) for p in e['loc']) or 'theme.yml'}: {e['msg']}"
        for e in error.errors()
    )


def load_theme(path: Path) -> Theme:
    """Load and validate a theme directory and its theme.yml descriptor."""
    path = Path(path)
    if not path.exists():
        raise ThemeInvalid(path, "directory does not exist")
    if not path.is_dir():
        raise ThemeInvalid(path, "not a directory")

    theme_file = path / THEME_FILE
    if not theme_file.is_file():
        raise ThemeInvalid(path, f"missing '{THEME_FILE}' file")

    try:
        data = yaml.safe_load(theme_file.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise ThemeInvalid(path, f"cannot read '{THEME_FILE}'") from e
    except yaml.YAMLError as e:
        raise ThemeInvalid(path, f"invalid YAML in '{THEME_FILE}'") from e
    if not isinstance(data, dict):
        raise ThemeInvalid(path, f"'{THEME_FILE}' must be a mapping")

    try:
        descriptor = ThemeFile.model_validate(data)
    except ValidationError as e:
        raise ThemeInvalid(path, _describe(e)) from e

    logger.debug("Loaded theme %r from %s", descriptor.name, path)
    return Theme(
        name=descriptor.name,
        path=path,
        assets=tuple(Path(a) for a in descriptor.assets),
        metadata=descriptor.metadata,
    )


def _environment(theme: Theme) -> Environment:
    # Bodies are already-rendered HTML, so output is not escaped.
    return Environment(
        loader=FileSystemLoader(str(theme.path / TEMPLATE_DIR)),
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


def render_template(theme: Theme, template: str, context: dict[str, Any]) -> str:
    """Render one of the theme's templates with the given context.

    Lookup, syntax and runtime failures inside the template all surface as
    RenderError with the original exception chained.
    """
    try:
        compiled = _environment(theme).get_template(template)
    except TemplateError as e:
        raise RenderError(template, f"{type(e).__name__}: {e}") from e
    try:
        return compiled.render(**context)
    except Exception as e:
        raise RenderError(template, f"{type(e).__name__}: {e}") from e


def copy_assets(theme: Theme, destination: Path) -> list[Path]:
    """Copy each theme asset (file or directory) into destination, overwriting.

    Returns the copied paths.
    """
    destination = Path(destination)
    copied = []
    for asset in theme.assets:
        src = theme.path / asset
        dest = destination / src.name
        try:
            if src.is_dir():
                shutil.copytree(src, dest, dirs_exist_ok=True)
            else:
                destination.mkdir(parents=True, exist_ok=True)
                shutil.copy2(src, dest)
        except OSError as e:
            raise IoError("copy theme asset", src) from e
        copied.append(dest)
    logger.debug("Copied %d theme asset(s) to %s", len(copied), destination)
    return copied
