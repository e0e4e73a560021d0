"""Rendering of Markdown doc comments as plain text."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from markdown_it import MarkdownIt
from markdown_it.token import Token

_LOG = logging.getLogger(__name__)

_LINK_RE = re.compile(r"""<a\s+href=["'](.+)["']""")
# Reference links such as [Foo][bar.Foo] are not valid inside a single proto
# comment; they are reduced to their link text.
_REFERENCE_RE = re.compile(r"\[([a-zA-Z1-9._]+)\]\[[a-zA-Z1-9._]*\]")

_IGNORED = frozenset(
    {
        "paragraph_open",
        "list_item_close",
        "heading_open",
        "heading_close",
        "strong_open",
        "strong_close",
    }
)

_PARSER = MarkdownIt("commonmark", {"html": True})


@dataclass
class _PlainRenderer:
    parts: list[str] = field(default_factory=list)
    # Links may nest in the token stream, so their targets form a stack.
    link_targets: list[str] = field(default_factory=list)
    list_level: int = 0
    # Set while an HTML <a> tag is open; softbreaks inside it are dropped.
    html_link_open: bool = False

    def render(self, tokens: Iterable[Token]) -> None:
        for token in tokens:
            self._token(token)

    def text(self) -> str:
        return "".join(self.parts)

    def _indent(self) -> None:
        self.parts.append("  " * self.list_level)

    def _close_link(self) -> None:
        if self.link_targets:
            self.parts.append(f" (at {self.link_targets.pop()})")

    def _token(self, token: Token) -> None:
        kind = token.type
        if kind == "inline":
            self.render(token.children or ())
        elif kind in ("text", "text_special"):
            self.parts.append(_REFERENCE_RE.sub(r"\1", token.content))
        elif kind == "code_inline":
            self.parts.append(token.content)
        elif kind == "softbreak":
            if self.html_link_open:
                return
            self.parts.append("\n")
            self._indent()
        elif kind == "paragraph_close":
            self.parts.append("\n\n")
        elif kind == "link_open":
            self.link_targets.append(str(token.attrGet("href") or ""))
        elif kind == "link_close":
            self._close_link()
        elif kind == "html_inline":
            self._html(token.content)
        elif kind == "bullet_list_open":
            self.list_level += 1
        elif kind == "bullet_list_close":
            self.list_level -= 1
        elif kind == "list_item_open":
            self._indent()
        elif kind in _IGNORED:
            pass
        else:
            _LOG.debug("unhandled markdown token type: %s", kind)

    def _html(self, content: str) -> None:
        # Font tags such as <b> and most closing tags are dropped entirely.
        if content == "<br>":
            self.parts.append("\n")
            return
        match = _LINK_RE.search(content)
        if match:
            self.link_targets.append(match.group(1))
            self.html_link_open = True
        elif content == "</a>":
            self._close_link()
            self.html_link_open = False


def md_plain(text: str) -> str:
    """Render Markdown (with inline HTML) as indented plain text.

    Links become their text followed by `` (at target)``, list items are
    indented by nesting level, and headings and bold markers are dropped.
    """
    renderer = _PlainRenderer()
    renderer.render(_PARSER.parse(text))
    return renderer.text().strip()