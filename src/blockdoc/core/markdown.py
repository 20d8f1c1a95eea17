"""Markdown <-> HTML transforms used by the block readers and writers."""

import re
from abc import ABC, abstractmethod
from typing import List

import mistune
from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

_WS_RE = re.compile(r"\s+")
# Inline Markdown syntax and raw HTML openers; an entity-decoded "<" must stay text
_ESCAPE_RE = re.compile(r"([\\`*_\[\]<&]|!(?=\[))")
# Text that would otherwise be read back as a heading, quote or list item
_BLOCK_START_RE = re.compile(r"^(#{1,6}(?=\s)|[>+-](?=\s)|\d+(?=\.\s))")


class MarkdownConverter(ABC):
    @abstractmethod
    def to_html(self, markdown: str) -> str:
        pass

    @abstractmethod
    def to_markdown(self, html: str) -> str:
        pass


class DefaultMarkdownConverter(MarkdownConverter):
    """mistune for rendering, a BeautifulSoup walk for the way back.

    Only the vocabulary the editor produces is handled on the way back:
    paragraphs, headings, (nested) lists, quotes, preformatted text and the
    usual inline tags. Anything else contributes its text content.
    """

    def __init__(self, escape_html: bool = False):
        self._render = mistune.create_markdown(escape=escape_html)

    def to_html(self, markdown: str) -> str:
        return self._render(markdown)

    def to_markdown(self, html: str) -> str:
        soup = BeautifulSoup(html, "html.parser")
        parts = []
        for child in soup.children:
            md = self._block(child)
            if md:
                parts.append(md)
        return "\n\n".join(parts)

    def _block(self, node) -> str:
        if isinstance(node, PreformattedString):
            return ""
        if isinstance(node, NavigableString):
            return self._escape_start(self._inline(node).strip())

        name = node.name
        if name in ("h1", "h2", "h3", "h4", "h5", "h6"):
            return f"{'#' * int(name[1])} {self._inline_children(node).strip()}"
        if name in ("ul", "ol"):
            return "\n".join(self._list_lines(node))
        if name == "blockquote":
            inner = "\n\n".join(p for p in (self._block(c) for c in node.children) if p)
            return "\n".join(f"> {line}" if line else ">" for line in inner.split("\n"))
        if name == "pre":
            return f"```\n{node.get_text().strip(chr(10))}\n```"
        return self._escape_start(self._inline_children(node).strip())

    def _list_lines(self, node: Tag) -> List[str]:
        lines: List[str] = []
        ordered = node.name == "ol"
        for i, li in enumerate(node.find_all("li", recursive=False), start=1):
            marker = f"{i}. " if ordered else "- "
            text_parts = []
            nested: List[str] = []
            for child in li.children:
                if isinstance(child, Tag) and child.name in ("ul", "ol"):
                    nested.extend(" " * len(marker) + line for line in self._list_lines(child))
                else:
                    text_parts.append(self._inline(child))
            lines.append(marker + "".join(text_parts).strip())
            lines.extend(nested)
        return lines

    def _inline_children(self, node: Tag) -> str:
        return "".join(self._inline(child) for child in node.children)

    def _inline(self, node) -> str:
        if isinstance(node, PreformattedString):
            return ""
        if isinstance(node, NavigableString):
            return _ESCAPE_RE.sub(r"\\\1", _WS_RE.sub(" ", str(node)))

        name = node.name
        if name == "br":
            return "  \n"
        if name == "img":
            alt = _ESCAPE_RE.sub(r"\\\1", node.get("alt", ""))
            return f"![{alt}]({node.get('src', '')})"

        text = self._inline_children(node)
        if not text.strip():
            return text
        if name in ("strong", "b"):
            return f"**{text.strip()}**"
        if name in ("em", "i"):
            return f"*{text.strip()}*"
        if name == "code":
            return f"`{node.get_text()}`"
        if name == "a":
            href = node.get("href")
            return f"[{text.strip()}]({href})" if href else text
        return text

    @staticmethod
    def _escape_start(text: str) -> str:
        lines = []
        for line in text.split("\n"):
            m = _BLOCK_START_RE.match(line)
            if m and m.group(1)[0].isdigit():
                line = m.group(1) + "\\" + line[m.end():]
            elif m:
                line = "\\" + line
            lines.append(line)
        return "\n".join(lines)
