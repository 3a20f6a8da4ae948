"""Marker dispatch tables.

A dispatch table maps a single trigger character to the ordered list of rules
tried when that character is met. Registration order is priority order: the
first rule registered for a character gets first refusal. One designated
fallback rule is moved to the end of every list once registration is done,
so specific rules always see a shared trigger before the literal fallback.

Rules are enum members; the parser maps each member to a bound method.

Usage:
    >>> table = build_inline_table()
    >>> table.handlers_for("<")[-1]
    <InlineType.SPECIAL_CHARACTER: 'special_character'>

"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class InlineType(Enum):
    """Inline grammar rules."""

    CODE = "code"
    EMAIL_TAG = "email_tag"
    EMPHASIS = "emphasis"
    ESCAPE_SEQUENCE = "escape_sequence"
    FOOTNOTE_MARKER = "footnote_marker"
    IMAGE = "image"
    LINK = "link"
    MARKUP = "markup"
    SPECIAL_CHARACTER = "special_character"
    STRIKETHROUGH = "strikethrough"
    URL = "url"
    URL_TAG = "url_tag"
    # Dialect extensions
    MARKING = "marking"
    INSERTIONS = "insertions"
    KEYSTROKES = "keystrokes"
    MATH_NOTATION = "math_notation"
    SUPERSCRIPT = "superscript"
    SUBSCRIPT = "subscript"
    EMOJI = "emoji"
    SMARTYPANTS = "smartypants"
    TYPOGRAPHER = "typographer"


class BlockType(Enum):
    """Block grammar rules."""

    ABBREVIATION = "abbreviation"
    CODE = "code"
    COMMENT = "comment"
    DEFINITION_LIST = "definition_list"
    FENCED_CODE = "fenced_code"
    FOOTNOTE = "footnote"
    HEADER = "header"
    LIST = "list"
    MARKUP = "markup"
    MATH_NOTATION = "math_notation"
    PARAGRAPH = "paragraph"
    QUOTE = "quote"
    REFERENCE = "reference"
    RULE = "rule"
    SETEXT_HEADER = "setext_header"
    TABLE = "table"


class MarkerTable(Generic[T]):
    """Trigger character -> ordered rule tags.

    Args:
        fallback: Tag moved to the end of every list by ``finalize``

    """

    __slots__ = ("_fallback", "_lists", "_pattern")

    def __init__(self, fallback: T | None = None) -> None:
        self._fallback = fallback
        self._lists: dict[str, list[T]] = {}
        self._pattern: re.Pattern[str] | None = None

    def register(self, markers: Iterable[str], tag: T) -> None:
        """Append ``tag`` to the list of every marker, in call order."""
        for marker in markers:
            if len(marker) != 1:
                raise ValueError(f"Trigger must be a single character, got {marker!r}")
            self._lists.setdefault(marker, []).append(tag)
        self._pattern = None

    def finalize(self) -> None:
        """Relocate the fallback tag to the end of every list containing it."""
        if self._fallback is None:
            return
        for tags in self._lists.values():
            if self._fallback in tags:
                tags[:] = [tag for tag in tags if tag != self._fallback]
                tags.append(self._fallback)

    def handlers_for(self, marker: str) -> tuple[T, ...]:
        return tuple(self._lists.get(marker, ()))

    @property
    def markers(self) -> str:
        return "".join(self._lists)

    def search(self, text: str, pos: int = 0) -> re.Match[str] | None:
        """Find the next trigger character at or after ``pos``."""
        if not self._lists:
            return None
        if self._pattern is None:
            self._pattern = re.compile("[" + re.escape(self.markers) + "]")
        return self._pattern.search(text, pos)

    def __contains__(self, marker: str) -> bool:
        return marker in self._lists


def build_inline_table() -> MarkerTable[InlineType]:
    """Build the inline table: base grammar rules, then dialect extensions."""
    table: MarkerTable[InlineType] = MarkerTable(fallback=InlineType.SPECIAL_CHARACTER)

    table.register("!", InlineType.IMAGE)
    table.register("&<>", InlineType.SPECIAL_CHARACTER)
    table.register("*_", InlineType.EMPHASIS)
    table.register(":", InlineType.URL)
    table.register("<", InlineType.URL_TAG)
    table.register("<", InlineType.EMAIL_TAG)
    table.register("<", InlineType.MARKUP)
    table.register("[", InlineType.FOOTNOTE_MARKER)
    table.register("[", InlineType.LINK)
    table.register("`", InlineType.CODE)
    table.register("~", InlineType.STRIKETHROUGH)
    table.register("\\", InlineType.ESCAPE_SEQUENCE)

    table.register("=", InlineType.MARKING)
    table.register("+", InlineType.INSERTIONS)
    table.register("[", InlineType.KEYSTROKES)
    table.register("\\$", InlineType.MATH_NOTATION)
    table.register("^", InlineType.SUPERSCRIPT)
    table.register("~", InlineType.SUBSCRIPT)
    table.register(":", InlineType.EMOJI)
    table.register("<>-.'\"`", InlineType.SMARTYPANTS)
    table.register("(.+!?", InlineType.TYPOGRAPHER)

    table.finalize()
    return table


def build_block_table() -> MarkerTable[BlockType]:
    """Build the block table keyed by the first non-space character of a line."""
    table: MarkerTable[BlockType] = MarkerTable()

    table.register("#", BlockType.HEADER)
    table.register("=-", BlockType.SETEXT_HEADER)
    table.register("-|:", BlockType.TABLE)
    table.register("*-_", BlockType.RULE)
    table.register("*+-0123456789", BlockType.LIST)
    table.register("<", BlockType.COMMENT)
    table.register("<", BlockType.MARKUP)
    table.register(">", BlockType.QUOTE)
    table.register("[", BlockType.FOOTNOTE)
    table.register("[", BlockType.REFERENCE)
    table.register("`~", BlockType.FENCED_CODE)
    table.register(":", BlockType.DEFINITION_LIST)
    table.register("*", BlockType.ABBREVIATION)

    table.register("\\$", BlockType.MATH_NOTATION)

    table.finalize()
    return table
