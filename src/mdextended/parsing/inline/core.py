"""Inline dispatch loop.

Scans text for trigger characters and offers each trigger to the rules
registered for it, in priority order. The first rule that returns an
acceptable match claims its span; text no rule claims is emitted as plain
text.

Acceptance:
    A rule may report an explicit start position (bare URLs are found by
    searching the surrounding text). The match is accepted only when that
    position lies between the end of the last emitted element and the
    trigger, and the span reaches past the trigger. A match that starts after
    the trigger would steal a later trigger and is discarded.

Non-nestables:
    The forbidden rule set of the enclosing element is carried into every
    element emitted here, so a link's text can never contain another link,
    however deeply nested.

"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import TYPE_CHECKING

from mdextended.excerpt import Excerpt
from mdextended.nodes import Element, Inline
from mdextended.utils.logger import get_logger

if TYPE_CHECKING:
    from mdextended.config import MarkdownConfig
    from mdextended.dispatch import InlineType, MarkerTable

logger = get_logger(__name__)

# Two or more spaces, or a backslash, before a newline
_HARD_BREAK_RE = re.compile(r"(?:[ ]*+\\|[ ]{2,}+)\n")

# Bracketed special attributes: {#id .class .other}
_ATTRIBUTE_RE = re.compile(r"[#.][-\w]+")


class InlineParsingCoreMixin:
    """Inline dispatch loop and plain-text handling.

    Required Host Attributes:
        - _config: MarkdownConfig
        - _inline_markers: MarkerTable[InlineType]
        - _inline_handlers: dict[InlineType, Callable[[Excerpt], Inline | None]]
        - _abbreviations: dict[str, str]
        - _abbreviation_re: re.Pattern[str] | None

    """

    _config: MarkdownConfig
    _inline_markers: MarkerTable[InlineType]
    _inline_handlers: dict[InlineType, Callable[[Excerpt], Inline | None]]
    _abbreviations: dict[str, str]
    _abbreviation_re: re.Pattern[str] | None

    def line_elements(
        self,
        text: str,
        non_nestables: frozenset[InlineType] = frozenset(),
    ) -> list[Element]:
        """Run the dispatch loop over one span of inline text.

        Args:
            text: Inline source
            non_nestables: Rules forbidden inside this span

        Returns:
            Inline elements, not yet resolved (``line`` content of emitted
            elements is processed by ``resolve``)
        """
        elements: list[Element] = []
        cursor = 0
        scan = 0

        while (found := self._inline_markers.search(text, scan)) is not None:
            trigger = found.start()
            excerpt = Excerpt.at(text, trigger, cursor)
            inline = self._dispatch(excerpt, non_nestables)

            if inline is None:
                scan = trigger + 1
                continue

            position = trigger if inline.position is None else inline.position
            element = inline.element
            element.non_nestables = element.non_nestables | non_nestables
            elements.extend(self.inline_text(text[cursor:position]))
            elements.append(element)
            cursor = scan = position + inline.extent

        elements.extend(self.inline_text(text[cursor:]))

        for element in elements:
            element.autobreak = False
        return elements

    def _dispatch(self, excerpt: Excerpt, non_nestables: frozenset[InlineType]) -> Inline | None:
        for tag in self._inline_markers.handlers_for(excerpt.marker):
            if tag in non_nestables:
                continue
            inline = self._inline_handlers[tag](excerpt)
            if inline is not None and _acceptable(inline, excerpt):
                return inline
        return None

    def inline_text(self, text: str) -> list[Element]:
        """Turn a run of unclaimed text into text, line break and abbreviation elements."""
        if not text:
            return []

        elements: list[Element] = []
        pieces = _HARD_BREAK_RE.split(text)
        for index, piece in enumerate(pieces):
            if index:
                elements.append(Element(name="br"))
                elements.append(Element(text="\n"))
            elements.extend(self._abbreviate(piece))
        return elements

    def _abbreviate(self, text: str) -> list[Element]:
        if not text:
            return []
        if self._abbreviation_re is None:
            return [Element(text=text)]

        elements: list[Element] = []
        last = 0
        for match in self._abbreviation_re.finditer(text):
            if match.start() > last:
                elements.append(Element(text=text[last : match.start()]))
            abbr = match.group(0)
            elements.append(
                Element(name="abbr", attributes={"title": self._abbreviations[abbr]}, text=abbr)
            )
            last = match.end()
        if last < len(text):
            elements.append(Element(text=text[last:]))
        return elements

    def resolve(self, element: Element) -> Element:
        """Run pending inline content of an element subtree through the dispatch loop."""
        if element.line is not None:
            element.children = self.line_elements(element.line, element.non_nestables)
            element.line = None
        if element.children:
            for child in element.children:
                self.resolve(child)
        return element

    def parse_attribute_data(self, attribute_string: str) -> dict[str, str | int | None]:
        """Parse ``#id .class`` attribute syntax.

        Returns an empty mapping when special attributes are disabled.
        """
        if not self._config.special_attributes:
            return {}

        data: dict[str, str | int | None] = {}
        classes: list[str] = []
        for attribute in _ATTRIBUTE_RE.findall(attribute_string):
            if attribute[0] == "#":
                data["id"] = attribute[1:]
            else:
                classes.append(attribute[1:])
        if classes:
            data["class"] = " ".join(classes)
        return data


def _acceptable(inline: Inline, excerpt: Excerpt) -> bool:
    position = excerpt.position if inline.position is None else inline.position
    end = position + inline.extent
    if position > excerpt.position:
        logger.debug("Discarded match starting after trigger at %d", excerpt.position)
        return False
    return excerpt.start <= position and excerpt.position < end <= len(excerpt.context)
