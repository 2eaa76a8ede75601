"""Application configuration: settings schema and docdoc.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from docdoc.core.models import Dialect


CONFIG_FILE = "docdoc.yaml"


class Settings(BaseModel):
    theme:    str = Field(default="/usr/local/share/docdoc/themes/default", description="Theme directory")
    template: str = Field(default="index.html", description="Template name within the theme")
    output_dir: str = Field(default="dist", description="Output root when none is given on the command line")
    dialect:  Dialect = Field(default=Dialect.commonmark, description="commonmark or gfm")
    preserve_first_component: bool = Field(default=False, description="Keep the first source path segment")
    heading_ids: bool = Field(default=False, description="Generate heading ids (gfm only)")
    verbose:  bool = False
    log_json: bool = False


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from docdoc.yaml, then DOCDOC_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping")

    for name in Settings.model_fields:
        if val := os.getenv(f"DOCDOC_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
