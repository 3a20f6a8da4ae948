"""Inline parsing for mdextended.

Composes the dispatch loop with the rule families:

- `InlineParsingCoreMixin`: dispatch loop, plain text, attribute parsing
- `EmphasisMixin`: bold/italic, strikethrough, mark, ins, kbd, sup, sub
- `LinkParsingMixin`: code spans, links, images, autolinks, inline HTML
- `SpecialParsingMixin`: math, escapes, emoji, typographer, smartypants
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from mdextended.dispatch import InlineType
from mdextended.parsing.inline.core import InlineParsingCoreMixin
from mdextended.parsing.inline.emphasis import EmphasisMixin
from mdextended.parsing.inline.links import LinkParsingMixin
from mdextended.parsing.inline.special import SpecialParsingMixin

if TYPE_CHECKING:
    from mdextended.excerpt import Excerpt
    from mdextended.nodes import Inline


class InlineParsingMixin(
    InlineParsingCoreMixin,
    EmphasisMixin,
    LinkParsingMixin,
    SpecialParsingMixin,
):
    """Combined inline parsing mixin."""

    def _inline_handler_map(self) -> dict[InlineType, Callable[[Excerpt], Inline | None]]:
        """Bind every inline rule tag to its handler."""
        return {
            InlineType.CODE: self._inline_code,
            InlineType.EMAIL_TAG: self._inline_email_tag,
            InlineType.EMPHASIS: self._inline_emphasis,
            InlineType.ESCAPE_SEQUENCE: self._inline_escape_sequence,
            InlineType.FOOTNOTE_MARKER: self._inline_footnote_marker,
            InlineType.IMAGE: self._inline_image,
            InlineType.LINK: self._inline_link,
            InlineType.MARKUP: self._inline_markup,
            InlineType.SPECIAL_CHARACTER: self._inline_special_character,
            InlineType.STRIKETHROUGH: self._inline_strikethrough,
            InlineType.URL: self._inline_url,
            InlineType.URL_TAG: self._inline_url_tag,
            InlineType.MARKING: self._inline_marking,
            InlineType.INSERTIONS: self._inline_insertions,
            InlineType.KEYSTROKES: self._inline_keystrokes,
            InlineType.MATH_NOTATION: self._inline_math_notation,
            InlineType.SUPERSCRIPT: self._inline_superscript,
            InlineType.SUBSCRIPT: self._inline_subscript,
            InlineType.EMOJI: self._inline_emoji,
            InlineType.SMARTYPANTS: self._inline_smartypants,
            InlineType.TYPOGRAPHER: self._inline_typographer,
        }


__all__ = [
    "EmphasisMixin",
    "InlineParsingCoreMixin",
    "InlineParsingMixin",
    "LinkParsingMixin",
    "SpecialParsingMixin",
]
