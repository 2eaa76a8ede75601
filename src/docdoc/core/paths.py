"""Destination path mapping and the intra-site link rewrite built on it"""

from pathlib import Path, PurePath, PurePosixPath
from typing import Union
from urllib.parse import urlsplit, urlunsplit


SOURCE_SUFFIX = ".md"
OUTPUT_SUFFIX = ".html"

PathLike = Union[str, PurePath]


def _segments(path: PurePath) -> list[str]:
    """Normal components of path: no root, drive or parent references."""
    return [part for part in path.parts if part not in (path.anchor, "..")]


def map_destination(source_path: PathLike, output_root: PathLike, skip_first_segment: bool) -> PurePath:
    """Map source_path under output_root, optionally dropping its first segment.

    Only the final component's `.md` suffix becomes `.html`; an empty
    remainder returns output_root itself.
    """
    source = Path(source_path) if isinstance(source_path, str) else source_path
    root = Path(output_root) if isinstance(output_root, str) else output_root

    segments = _segments(source)
    if skip_first_segment:
        segments = segments[1:]
    if not segments:
        return root

    dest = root.joinpath(*segments)
    if dest.suffix == SOURCE_SUFFIX:
        dest = dest.with_suffix(OUTPUT_SUFFIX)
    return dest


def rewrite_link(href: str) -> str:
    """Point a root-rooted link to a markdown document at its generated HTML page.

    Relative links, fragments and external URLs pass through untouched, as
    does any link whose path does not end in `.md`.
    """
    parts = urlsplit(href)
    if parts.scheme or parts.netloc or not parts.path.startswith("/"):
        return href
    path = PurePosixPath(parts.path)
    if path.suffix != SOURCE_SUFFIX:
        return href
    target = map_destination(path, PurePosixPath("/"), skip_first_segment=True)
    return urlunsplit(("", "", str(target), parts.query, parts.fragment))
