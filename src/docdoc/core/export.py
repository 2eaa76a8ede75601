"""Write a rendered document to its destination"""

from pathlib import Path

from docdoc.core.models import Document
from docdoc.errors import IoError


def write_document(doc: Document) -> Path:
    """Write doc.body to doc.path, creating parent directories as needed."""
    path = Path(doc.path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(doc.body, encoding="utf-8")
    except OSError as e:
        raise IoError("write document", path) from e
    return path
