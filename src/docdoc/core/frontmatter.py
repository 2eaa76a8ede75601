"""Frontmatter splitting, metadata parsing, and document loading"""

import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from docdoc.core.models import Document
from docdoc.errors import (
    DocumentNotFile,
    DocumentNotFound,
    IoError,
    MetadataParseError,
    UnterminatedFrontmatter,
)


logger = logging.getLogger(__name__)

DELIMITER = "---\n"


def split(text: str) -> tuple[Optional[str], str]:
    """Return (frontmatter_block, body); the block keeps both delimiter lines.

    Text that does not open with the delimiter line is returned whole as body.
    """
    if not text.startswith(DELIMITER):
        return None, text

    start = len(DELIMITER)
    if text.startswith(DELIMITER, start):
        end = start
    else:
        idx = text.find("\n" + DELIMITER, start)
        if idx == -1:
            raise UnterminatedFrontmatter()
        end = idx + 1
    end += len(DELIMITER)
    return text[:end], text[end:]


def parse_metadata(block: Optional[str], source: str = "frontmatter") -> dict[str, Any]:
    """Parse a delimited frontmatter block into a mapping ({} when absent or empty)."""
    if block is None:
        return {}
    inner = block[len(DELIMITER):-len(DELIMITER)]
    return parse_yaml_mapping(inner, source)


def parse_yaml_mapping(text: str, source: str) -> dict[str, Any]:
    """Load YAML text that must be a mapping; empty text gives {}."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise MetadataParseError(source, "invalid YAML") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MetadataParseError(source, f"expected a mapping, got {type(data).__name__}")
    return data


def load_document(path: Path) -> Document:
    """Read a markdown file and split it into metadata and body."""
    path = Path(path)
    if not path.exists():
        raise DocumentNotFound(path)
    if not path.is_file():
        raise DocumentNotFile(path)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise IoError("read document", path) from e

    try:
        block, body = split(text)
    except UnterminatedFrontmatter:
        raise UnterminatedFrontmatter(path) from None
    metadata = parse_metadata(block, source=f"frontmatter of '{path}'")
    logger.debug("Loaded %s (%d metadata keys)", path, len(metadata))
    return Document(path=path, metadata=metadata, body=body)
