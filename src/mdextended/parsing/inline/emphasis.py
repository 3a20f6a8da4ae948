"""Emphasis-like inline rules.

Bold and italic (``*`` / ``_``), strikethrough ``~~x~~`` and the symmetric
wraps of the dialect:

    ==marked==     -> <mark>      literal content
    ++inserted++   -> <ins>       literal content
    [[Ctrl]]       -> <kbd>       literal content
    ^super^        -> <sup>       content re-parsed inline
    ~sub~          -> <sub>       content re-parsed inline

Every wrap needs non-empty content, and its closing run may not be followed by
one more marker of the same kind.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from mdextended.nodes import Element, Inline

if TYPE_CHECKING:
    from mdextended.config import MarkdownConfig
    from mdextended.excerpt import Excerpt

_STRONG_RE: dict[str, re.Pattern[str]] = {
    "*": re.compile(r"\*{2}((?:\\\*|[^*]|\*[^*]*+\*)+?)\*{2}(?!\*)", re.S),
    "_": re.compile(r"__((?:\\_|[^_]|_[^_]*+_)+?)__(?!_)", re.S),
}

_EM_RE: dict[str, re.Pattern[str]] = {
    "*": re.compile(r"\*((?:\\\*|[^*]|\*\*[^*]+?\*\*)+?)\*(?!\*)", re.S),
    "_": re.compile(r"_((?:\\_|[^_]|__[^_]*__)+?)_(?!_)\b", re.S),
}

_STRIKETHROUGH_RE = re.compile(r"~~(?=\S)(.+?)(?<=\S)~~", re.S)
_MARKING_RE = re.compile(r"==((?:\\=|[^=]|=[^=]*=)+?)==(?!=)", re.S)
_INSERTIONS_RE = re.compile(r"\+\+((?:\\\+|[^+]|\+[^+]*\+)+?)\+\+(?!\+)", re.S)
_KEYSTROKES_RE = re.compile(r"\[\[([^\[\]]+|[\[\]])\]\](?!\])", re.S)
_SUPERSCRIPT_RE = re.compile(r"\^((?:\\\^|[^^]|\^[^^]+?\^\^)+?)\^(?!\^)", re.S)
_SUBSCRIPT_RE = re.compile(r"~((?:\\~|[^~]|~~[^~]*~~)+?)~(?!~)", re.S)


class EmphasisMixin:
    """Emphasis, strikethrough and symmetric wrap rules.

    Required Host Attributes:
        - _config: MarkdownConfig

    """

    _config: MarkdownConfig

    def _inline_emphasis(self, excerpt: Excerpt) -> Inline | None:
        emphasis = self._config.emphasis
        if not emphasis.enabled or len(excerpt.text) < 2:
            return None

        marker = excerpt.marker
        text = excerpt.text
        if emphasis.bold and text[1] == marker and (match := _STRONG_RE[marker].match(text)):
            name = "strong"
        elif emphasis.italic and (match := _EM_RE[marker].match(text)):
            name = "em"
        else:
            return None

        return Inline(extent=match.end(), element=Element(name=name, line=match.group(1)))

    def _inline_strikethrough(self, excerpt: Excerpt) -> Inline | None:
        emphasis = self._config.emphasis
        if not (emphasis.enabled and emphasis.strikethroughs):
            return None
        match = _STRIKETHROUGH_RE.match(excerpt.text)
        if match is None:
            return None
        return Inline(extent=match.end(), element=Element(name="del", line=match.group(1)))

    def _inline_marking(self, excerpt: Excerpt) -> Inline | None:
        emphasis = self._config.emphasis
        if not (emphasis.enabled and emphasis.marking):
            return None
        return _wrap(_MARKING_RE, excerpt, "mark")

    def _inline_insertions(self, excerpt: Excerpt) -> Inline | None:
        emphasis = self._config.emphasis
        if not (emphasis.enabled and emphasis.insertions):
            return None
        return _wrap(_INSERTIONS_RE, excerpt, "ins")

    def _inline_keystrokes(self, excerpt: Excerpt) -> Inline | None:
        emphasis = self._config.emphasis
        if not (emphasis.enabled and emphasis.keystrokes):
            return None
        return _wrap(_KEYSTROKES_RE, excerpt, "kbd")

    def _inline_superscript(self, excerpt: Excerpt) -> Inline | None:
        emphasis = self._config.emphasis
        if not (emphasis.enabled and emphasis.superscript):
            return None
        return _wrap(_SUPERSCRIPT_RE, excerpt, "sup", nested=True)

    def _inline_subscript(self, excerpt: Excerpt) -> Inline | None:
        emphasis = self._config.emphasis
        if not (emphasis.enabled and emphasis.subscript):
            return None
        return _wrap(_SUBSCRIPT_RE, excerpt, "sub", nested=True)


def _wrap(pattern: re.Pattern[str], excerpt: Excerpt, name: str, nested: bool = False) -> Inline | None:
    match = pattern.match(excerpt.text)
    if match is None:
        return None
    if nested:
        element = Element(name=name, line=match.group(1))
    else:
        element = Element(name=name, text=match.group(1))
    return Inline(extent=match.end(), element=element)
