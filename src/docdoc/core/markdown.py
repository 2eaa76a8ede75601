"""Markdown to HTML conversion for both dialects, with intra-site link rewriting"""

from typing import Callable

from markdown_it import MarkdownIt
from markdown_it.token import Token
from markdown_it.tree import SyntaxTreeNode
from mdit_py_plugins.anchors import anchors_plugin
from mdit_py_plugins.superscript import superscript_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

from docdoc.core.models import Dialect
from docdoc.core.paths import rewrite_link


def _make_parser(dialect: Dialect, heading_ids: bool = False) -> MarkdownIt:
    """Build a MarkdownIt instance configured for the given dialect."""
    if dialect is Dialect.gfm:
        md = MarkdownIt("gfm-like").use(tasklists_plugin).use(superscript_plugin)
        if heading_ids:
            md.use(anchors_plugin, max_level=6)
        return md
    return MarkdownIt("commonmark").enable("table")


def _rewrite_tokens(tokens: list[Token], rewrite: Callable[[str], str]) -> None:
    """Rewrite link targets in a flat token stream, descending into inline children."""
    for token in tokens:
        if token.children:
            _rewrite_tokens(token.children, rewrite)
        if token.type == "link_open":
            href = token.attrGet("href")
            if href is not None:
                token.attrSet("href", rewrite(str(href)))


def _rewrite_tree(root: SyntaxTreeNode, rewrite: Callable[[str], str]) -> None:
    """Rewrite link targets by walking the nested syntax tree."""
    for node in root.walk():
        if node.type == "link" and "href" in node.attrs:
            node.attrs["href"] = rewrite(str(node.attrs["href"]))


def render(body: str, dialect: Dialect = Dialect.commonmark, heading_ids: bool = False) -> str:
    """Convert markdown body to an HTML fragment, rewriting root-rooted .md links."""
    dialect = Dialect(dialect)
    md = _make_parser(dialect, heading_ids)
    env: dict = {}
    tokens = md.parse(body, env)

    if dialect is Dialect.gfm:
        tree = SyntaxTreeNode(tokens)
        _rewrite_tree(tree, rewrite_link)
        tokens = tree.to_tokens()
    else:
        _rewrite_tokens(tokens, rewrite_link)

    return md.renderer.render(tokens, md.options, env)
