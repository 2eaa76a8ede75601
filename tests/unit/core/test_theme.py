"""Unit tests for core/theme.py"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from docdoc.core.theme import copy_assets, load_theme, render_template
from docdoc.errors import IoError, RenderError, ThemeInvalid


CONTEXT = {"document": {"path": "docs/a.md", "metadata": {"title": "T", "author": "A"}, "body": "<p>x</p>"}}


# --- load_theme ---

def test_load_theme(theme_dir):
    theme = load_theme(theme_dir)
    assert theme.name == "default"
    assert theme.path == theme_dir
    assert theme.assets == (Path("style.css"), Path("img"))
    assert theme.metadata == {"title": "Untitled", "author": "Anonymous"}


def test_theme_is_read_only(theme_dir):
    theme = load_theme(theme_dir)
    with pytest.raises(ValidationError):
        theme.name = "other"


def test_load_theme_missing_directory(tmp_path):
    with pytest.raises(ThemeInvalid, match="does not exist"):
        load_theme(tmp_path / "nope")


def test_load_theme_not_a_directory(tmp_path):
    f = tmp_path / "theme.yml"
    f.write_text("name: x\n")
    with pytest.raises(ThemeInvalid, match="not a directory"):
        load_theme(f)


def test_load_theme_missing_descriptor(tmp_path):
    with pytest.raises(ThemeInvalid, match="theme.yml"):
        load_theme(tmp_path)


def test_load_theme_invalid_yaml(tmp_path):
    (tmp_path / "theme.yml").write_text("name: [unclosed\n")
    with pytest.raises(ThemeInvalid, match="invalid YAML"):
        load_theme(tmp_path)


@pytest.mark.parametrize("descriptor,key", [
    ({"assets": [], "metadata": {}}, "name"),
    ({"name": 42, "assets": [], "metadata": {}}, "name"),
    ({"name": "t", "metadata": {}}, "assets"),
    ({"name": "t", "assets": "style.css", "metadata": {}}, "assets"),
    ({"name": "t", "assets": [], }, "metadata"),
    ({"name": "t", "assets": [], "metadata": ["title"]}, "metadata"),
])
def test_load_theme_schema_errors_name_the_key(tmp_path, make_theme, descriptor, key):
    make_theme(tmp_path / "t", descriptor)
    with pytest.raises(ThemeInvalid, match=f"{key}:"):
        load_theme(tmp_path / "t")


def test_load_theme_descriptor_not_mapping(tmp_path):
    (tmp_path / "theme.yml").write_text("- a\n- b\n")
    with pytest.raises(ThemeInvalid, match="mapping"):
        load_theme(tmp_path)


# --- render_template ---

def test_render_template(theme_dir):
    html = render_template(load_theme(theme_dir), "index.html", CONTEXT)
    assert html == "<h1>T</h1><p>x</p>"


def test_render_template_exposes_path(theme_dir):
    html = render_template(load_theme(theme_dir), "byline.html", CONTEXT)
    assert html == "A|docs/a.md"


def test_render_template_missing(theme_dir):
    with pytest.raises(RenderError, match="missing.html"):
        render_template(load_theme(theme_dir), "missing.html", CONTEXT)


def test_render_template_syntax_error(tmp_path, make_theme):
    root = make_theme(tmp_path / "t", {"name": "t", "assets": [], "metadata": {}},
                      templates={"index.html": "{% if %}"})
    with pytest.raises(RenderError, match="TemplateSyntaxError"):
        render_template(load_theme(root), "index.html", CONTEXT)


def test_render_template_undefined_variable(tmp_path, make_theme):
    root = make_theme(tmp_path / "t", {"name": "t", "assets": [], "metadata": {}},
                      templates={"index.html": "{{ document.metadata.undeclared }}"})
    with pytest.raises(RenderError, match="UndefinedError"):
        render_template(load_theme(root), "index.html", CONTEXT)


def test_render_template_runtime_failure(tmp_path, make_theme):
    """Exceptions raised while the template runs are wrapped and chained."""
    root = make_theme(tmp_path / "t", {"name": "t", "assets": [], "metadata": {}},
                      templates={"index.html": "{{ document.metadata.title + 1 }}"})
    with pytest.raises(RenderError, match="TypeError") as exc:
        render_template(load_theme(root), "index.html", CONTEXT)
    assert isinstance(exc.value.__cause__, TypeError)


# --- copy_assets ---

def test_copy_assets_files_and_directories(theme_dir, tmp_path):
    dest = tmp_path / "out" / "nested"
    copied = copy_assets(load_theme(theme_dir), dest)
    assert copied == [dest / "style.css", dest / "img"]
    assert (dest / "style.css").read_text() == "body { margin: 0; }"
    assert (dest / "img" / "logo.png").read_bytes() == b"\x89PNG"


def test_copy_assets_overwrites(theme_dir, tmp_path):
    dest = tmp_path / "out"
    dest.mkdir()
    (dest / "style.css").write_text("old")
    theme = load_theme(theme_dir)
    copy_assets(theme, dest)
    copy_assets(theme, dest)
    assert (dest / "style.css").read_text() == "body { margin: 0; }"


def test_copy_assets_missing_asset(tmp_path, make_theme):
    root = make_theme(tmp_path / "t", {"name": "t", "assets": ["ghost.css"], "metadata": {}})
    with pytest.raises(IoError, match="ghost.css"):
        copy_assets(load_theme(root), tmp_path / "out")
