"""Single-document conversion: load -> render -> merge -> template -> write"""

import logging
from pathlib import Path
from typing import Any, Iterable

from docdoc.core.export import write_document
from docdoc.core.frontmatter import load_document
from docdoc.core.markdown import render
from docdoc.core.metadata import apply_overrides, merge
from docdoc.core.models import Dialect, Document, Theme
from docdoc.core.paths import map_destination
from docdoc.core.theme import copy_assets, render_template
from docdoc.errors import IoError


logger = logging.getLogger(__name__)


def build_context(doc: Document, theme: Theme) -> dict[str, Any]:
    """Template context for doc, with its metadata filtered through the theme."""
    return {
        "document": {
            "path": str(doc.path),
            "metadata": merge(theme.metadata, doc.metadata),
            "body": doc.body,
        },
    }


def run_build(
    source: Path,
    output_root: Path,
    theme: Theme,
    template: str,
    dialect: Dialect = Dialect.commonmark,
    skip_first_segment: bool = True,
    overrides: Iterable[dict[str, Any]] = (),
    heading_ids: bool = False,
    ) -> Document:
    """Convert one markdown file to a themed HTML page and write it.

    Any failure aborts the remaining steps. Returns the written document,
    whose path is the destination and whose body is the final page.
    """
    dialect = Dialect(dialect)
    doc = load_document(Path(source))
    doc.metadata = apply_overrides(doc.metadata, overrides)

    doc.body = render(doc.body, dialect, heading_ids=heading_ids)
    logger.debug("Rendered %s as %s", doc.path, dialect.value)

    doc.body = render_template(theme, template, build_context(doc, theme))
    destination = Path(map_destination(doc.path, Path(output_root), skip_first_segment))
    if destination == Path(output_root):
        raise IoError(
            "write document", destination,
            hint=f"no path left of '{doc.path}' once its first component is stripped; keep it instead",
        )
    doc.path = destination

    write_document(doc)
    copy_assets(theme, doc.path.parent)
    logger.info("Wrote %s", doc.path)
    return doc
