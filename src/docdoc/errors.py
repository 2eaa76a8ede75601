"""Exception hierarchy for document conversion failures"""

from pathlib import Path


class DocdocError(Exception):
    """Base class for every error raised while converting a document."""


class UnterminatedFrontmatter(DocdocError):
    """Opening `---` delimiter without a matching closing line."""

    def __init__(self, path: Path = None):
        self.path = path
        where = f" in '{path}'" if path else ""
        super().__init__(f"Frontmatter never ends{where}")


class MetadataParseError(DocdocError):
    """Frontmatter or override YAML that is invalid or not a mapping."""

    def __init__(self, source: str, reason: str):
        self.source = source
        super().__init__(f"Invalid metadata in {source}: {reason}")


class DocumentNotFound(DocdocError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Document not found: '{path}'")


class DocumentNotFile(DocdocError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Document is not a file: '{path}'")


class ThemeInvalid(DocdocError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Theme not valid: '{path}' ({reason})")


class RenderError(DocdocError):
    def __init__(self, template: str, reason: str):
        self.template = template
        super().__init__(f"Failed to render template '{template}': {reason}")


class IoError(DocdocError):
    """Read, write or copy failure; any underlying OSError is chained as the cause."""

    def __init__(self, action: str, path: Path, hint: str = None):
        self.path = path
        message = f"Failed to {action}: '{path}'"
        super().__init__(f"{message} ({hint})" if hint else message)
