"""Root test configuration: shared theme fixtures"""

from pathlib import Path

import pytest
import yaml


INDEX_TEMPLATE = "<h1>{{ document.metadata.title }}</h1>{{ document.body }}"


def _write_theme(root: Path, descriptor: dict, templates: dict = None) -> Path:
    """Create a theme directory with theme.yml and the given templates."""
    root.mkdir(parents=True, exist_ok=True)
    (root / "theme.yml").write_text(yaml.safe_dump(descriptor, sort_keys=False))
    tpl_dir = root / "templates"
    tpl_dir.mkdir(exist_ok=True)
    for name, body in (templates or {"index.html": INDEX_TEMPLATE}).items():
        (tpl_dir / name).write_text(body)
    return root


@pytest.fixture(name="theme_dir")
def theme_dir_fixture(tmp_path):
    """A valid theme with two metadata keys, a stylesheet and an image directory."""
    root = _write_theme(tmp_path / "theme", {
        "name": "default",
        "assets": ["style.css", "img"],
        "metadata": {"title": "Untitled", "author": "Anonymous"},
    }, templates={
        "index.html": INDEX_TEMPLATE,
        "byline.html": "{{ document.metadata.author }}|{{ document.path }}",
    })
    (root / "style.css").write_text("body { margin: 0; }")
    (root / "img").mkdir()
    (root / "img" / "logo.png").write_bytes(b"\x89PNG")
    return root


@pytest.fixture(name="make_theme")
def make_theme_fixture():
    """Factory for ad-hoc theme directories."""
    return _write_theme
