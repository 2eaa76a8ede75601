"""Theme/document metadata merging and external metadata overrides"""

import copy
from pathlib import Path
from typing import Any, Iterable

from docdoc.core.frontmatter import parse_yaml_mapping
from docdoc.errors import IoError


def merge(theme_metadata: dict[str, Any], document_metadata: dict[str, Any]) -> dict[str, Any]:
    """Overlay document values onto the theme's metadata.

    The theme's keys are an allow-list: document keys it does not declare are
    dropped without complaint, and the result keeps theme declaration order.
    """
    merged = copy.deepcopy(theme_metadata)
    for key, value in document_metadata.items():
        if key in merged:
            merged[key] = value
    return merged


def apply_overrides(metadata: dict[str, Any], overrides: Iterable[dict[str, Any]]) -> dict[str, Any]:
    """Layer override mappings onto document metadata in order (plain key overwrite)."""
    result = dict(metadata)
    for override in overrides:
        result.update(override)
    return result


def load_override(fragment: str) -> dict[str, Any]:
    """Parse one override: inline YAML, or `@path` to read YAML from a file."""
    if fragment.startswith("@"):
        path = Path(fragment[1:])
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise IoError("read extra metadata file", path) from e
        return parse_yaml_mapping(text, source=f"extra metadata file '{path}'")
    return parse_yaml_mapping(fragment, source=f"extra metadata '{fragment}'")
