"""Minimal Markdown rendering for project descriptions.

Only headings (``#`` to ``###``), flat bullet lists, paragraphs, emphasis and
links are recognised. Everything else is emitted as escaped text.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any, Sequence, cast

from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from markdown_it.token import Token

EMPHASIS_TOKENS = {"em_open", "em_close", "strong_open", "strong_close"}

HEADING_RE = re.compile(r"^(#{1,3})\s+(.+?)\s*$")
LIST_ITEM_RE = re.compile(r"^\s*[-*]\s+(.+?)\s*$")
BLANK_LINES_RE = re.compile(r"\n\s*\n")

# `#` renders as <h2> because the modal title already owns <h1>/<h2> styling.
HEADING_OFFSET = 1


def _render_link_open(
    self: Any,
    tokens: Sequence[Token],
    idx: int,
    options: Any,
    env: Any,
) -> str:
    token = tokens[idx]
    token.attrSet("target", "_blank")
    token.attrSet("rel", "noopener noreferrer")
    return cast(str, self.renderToken(tokens, idx, options, env))


def _literal_underscores(state: StateCore) -> None:
    """Turn ``_x_`` / ``__x__`` emphasis back into text; only asterisks emphasise."""
    for block in state.tokens:
        for token in block.children or ():
            if token.type in EMPHASIS_TOKENS and token.markup.startswith("_"):
                token.type = "text"
                token.tag = ""
                token.nesting = 0
                token.content = token.markup


@lru_cache(maxsize=1)
def _inline_renderer() -> MarkdownIt:
    """Configure and cache an inline renderer limited to emphasis and links."""
    md = MarkdownIt("zero")
    md.enable(["emphasis", "link"])
    md.core.ruler.push("literal_underscores", _literal_underscores)
    md.add_render_rule("link_open", _render_link_open)
    return md


def render_inline(text: str) -> str:
    """Render emphasis and links; all other text is HTML-escaped."""
    return cast(str, _inline_renderer().renderInline(text))


def render_markdown(text: str) -> str:
    """Render the supported Markdown subset to an HTML fragment."""
    if not text or not text.strip():
        return ""
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    blocks: list[str] = []
    for chunk in BLANK_LINES_RE.split(normalized.strip()):
        blocks.extend(_render_block(chunk.split("\n")))
    return "\n".join(blocks)


def _render_block(lines: list[str]) -> list[str]:
    """Render one blank-line separated chunk, which may mix element kinds."""
    rendered: list[str] = []
    paragraph: list[str] = []
    items: list[str] = []

    def flush_paragraph() -> None:
        if paragraph:
            joined = " ".join(paragraph)
            rendered.append(f"<p>{render_inline(joined)}</p>")
            paragraph.clear()

    def flush_list() -> None:
        if items:
            body = "".join(f"<li>{render_inline(item)}</li>" for item in items)
            rendered.append(f"<ul>{body}</ul>")
            items.clear()

    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        heading = HEADING_RE.match(line)
        if heading:
            flush_paragraph()
            flush_list()
            level = len(heading.group(1)) + HEADING_OFFSET
            rendered.append(f"<h{level}>{render_inline(heading.group(2))}</h{level}>")
            continue
        item = LIST_ITEM_RE.match(raw)
        if item:
            flush_paragraph()
            items.append(item.group(1))
            continue
        flush_list()
        paragraph.append(line)

    flush_paragraph()
    flush_list()
    return rendered
