"""Document and theme data models shared by the conversion pipeline"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr


class Dialect(str, Enum):
    commonmark = "commonmark"
    gfm = "gfm"


@dataclass
class Document:
    """A single document flowing through the pipeline; owned by one caller."""
    path:     Path
    metadata: dict[str, Any] = field(default_factory=dict)   # never None
    body:     str = ""                                        # markdown, then HTML fragment, then page


class ThemeFile(BaseModel):
    """Schema of a theme's theme.yml descriptor."""
    name:     StrictStr
    assets:   list[StrictStr]
    metadata: dict[str, Any]


class Theme(BaseModel):
    """A loaded theme; read-only once constructed."""
    model_config = ConfigDict(frozen=True)

    name:     str
    path:     Path
    assets:   tuple[Path, ...] = ()      # relative to path
    metadata: dict[str, Any] = {}        # allow-listed template variables and defaults
