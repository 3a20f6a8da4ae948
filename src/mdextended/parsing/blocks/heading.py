"""Heading rules and heading capture.

ATX headings (``# Title``, up to six hashes, optional closing hashes) and
setext headings (a paragraph underlined with ``=`` or ``-``). Both are
restricted to ``headings.allowed``; a heading at a disallowed level is left
to the other rules.

Every heading is captured as it completes: it receives an anchor id (unless
``{#id}`` supplied one) and, when its level is listed in ``toc.headings``, a
Heading Record in the table of contents.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from mdextended.dispatch import BlockType, InlineType
from mdextended.nodes import Element
from mdextended.parsing.blocks.core import Block
from mdextended.toc import HeadingRecord
from mdextended.utils.text import strip_tags

if TYPE_CHECKING:
    from mdextended.config import MarkdownConfig
    from mdextended.excerpt import Line
    from mdextended.renderers.html import HtmlRenderer
    from mdextended.toc import AnchorFactory, TableOfContents, TocPlaceholder

_CLOSING_HASHES_RE = re.compile(r"(?:^|[ ]+)#+[ ]*$")
_HEADING_ATTRIBUTES_RE = re.compile(r"[ #]*{((?:[#.][-\w]+[ ]*)+)}[ ]*$")

_HEADING_NON_NESTABLES = frozenset({InlineType.FOOTNOTE_MARKER})


class HeadingParsingMixin:
    """ATX and setext headings plus anchor and ToC capture.

    Required Host Attributes:
        - _config: MarkdownConfig
        - _anchors: AnchorFactory
        - _toc: TableOfContents
        - _renderer: HtmlRenderer
        - _placeholder: TocPlaceholder | None

    Required Host Methods:
        - line_elements(text, non_nestables) -> list[Element]
        - resolve(element) -> Element
        - parse_attribute_data(attribute_string) -> dict

    """

    _config: MarkdownConfig
    _anchors: AnchorFactory
    _toc: TableOfContents
    _renderer: HtmlRenderer
    _placeholder: TocPlaceholder | None

    def _heading_allowed(self, name: str) -> bool:
        headings = self._config.headings
        return headings.enabled and name in headings.allowed

    def _block_header(self, line: Line, current: Block | None) -> Block | None:
        level = len(line.text) - len(line.text.lstrip("#"))
        if level > 6:
            return None
        name = f"h{level}"
        if not self._heading_allowed(name):
            return None

        text = _CLOSING_HASHES_RE.sub("", line.text[level:]).strip()
        element = Element(name=name, line=text)

        if self._config.special_attributes and (match := _HEADING_ATTRIBUTES_RE.search(text)):
            element.attributes = self.parse_attribute_data(match.group(1))
            element.line = text[: match.start()]

        self._capture_heading(element)
        return Block(BlockType.HEADER, element)

    def _block_setext_header(self, line: Line, current: Block | None) -> Block | None:
        if current is None or current.type is not BlockType.PARAGRAPH or current.interrupted:
            return None
        if line.indent >= 4 or line.text.rstrip(" ").rstrip(line.text[0]) != "":
            return None

        name = "h1" if line.text[0] == "=" else "h2"
        if not self._heading_allowed(name):
            return None

        current.element.name = name
        current.type = BlockType.SETEXT_HEADER
        self._capture_heading(current.element)
        return current

    def _capture_heading(self, element: Element) -> None:
        """Assign an anchor id and record the heading for the table of contents.

        A hidden ToC tag in the heading is restored before the anchor and the
        record text are derived; the element itself keeps it hidden.
        """
        source = element.line or ""
        anchor = element.get_attribute("id")
        if anchor is None:
            anchor = self._anchors.create(self._restore_tag(source))
            if anchor is not None:
                element.set_attribute("id", anchor)
        else:
            self._anchors.reserve(str(anchor))

        toc = self._config.toc
        if not toc.enabled or element.name is None or element.name not in toc.headings:
            return
        self._toc.add(
            HeadingRecord(
                text=self._restore_tag(self.heading_text(source)),
                level=int(element.name[1]),
                id="" if anchor is None else str(anchor),
            )
        )

    def _restore_tag(self, text: str) -> str:
        if self._placeholder is None:
            return text
        return self._placeholder.decode(text)

    def heading_text(self, source: str) -> str:
        """Render heading source inline, then strip it down to plain text."""
        holder = Element(line=source, non_nestables=_HEADING_NON_NESTABLES)
        self.resolve(holder)
        return strip_tags(self._renderer.render(holder.children or [])).strip()
