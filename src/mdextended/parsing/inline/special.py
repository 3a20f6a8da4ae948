"""Dialect inline rules: math, escapes, emoji and typography.

Math spans are captured verbatim, delimiters included, so their content is
never reinterpreted by other rules. The escape rule checks the math
delimiters first: ``\\(x\\)`` is math, not an escaped parenthesis.

Typographer (``typographer``):
    (c) (r) (tm) (p) +-  ->  © ® ™ ¶ ±
    ..  ....             ->  ellipsis
    !...  ?...           ->  !..  ?..

Smartypants (``smarty``):
    ``x''  "x"  'x'      ->  curly quotes (opening quote at a word boundary)
    <<x>>                ->  angle quotes
    ---  --  ...         ->  em dash, en dash, ellipsis

"""

from __future__ import annotations

import html
import re
from functools import lru_cache
from typing import TYPE_CHECKING

from mdextended.config import MathDelimiter
from mdextended.emoji import EMOJI
from mdextended.nodes import Element, Inline
from mdextended.parsing.charsets import ESCAPABLE, WHITESPACE_OR_EMPTY

if TYPE_CHECKING:
    from mdextended.config import MarkdownConfig
    from mdextended.excerpt import Excerpt

_EMOJI_RE = re.compile(r":([a-zA-Z0-9_+-]+):")

_TYPOGRAPHER_RE = re.compile(r"\+-|\(p\)|\(tm\)|\(r\)|\(c\)|\.{2,}|!\.{3,}|\?\.{3,}", re.I)
_TYPOGRAPHER_SYMBOLS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\(c\)", re.I), "©"),
    (re.compile(r"\(r\)", re.I), "®"),
    (re.compile(r"\(tm\)", re.I), "™"),
    (re.compile(r"\(p\)", re.I), "¶"),
    (re.compile(r"\+-"), "±"),
    (re.compile(r"!\.{3,}"), "!.."),
    (re.compile(r"\?\.{3,}"), "?.."),
)
_TYPOGRAPHER_ELLIPSES: tuple[re.Pattern[str], ...] = (
    re.compile(r"\.{4,}"),
    re.compile(r"(?<![.!?])\.{2}(?!\.)"),
)

_SMARTYPANTS_RE = re.compile(
    r"(``)(?!\s)([^\"'`]+)('')"
    r"|(\")(?!\s)([^\"]+)(\")"
    r"|(')(?!\s)([^']+)(')"
    r"|(<<)(?!\s)([^<>]+)(>>)"
    r"|(?<!\.)(\.{3})(?!\.)"
    r"|(---)"
    r"|(--)"
)


@lru_cache(maxsize=64)
def inline_math_pattern(delimiter: MathDelimiter) -> re.Pattern[str]:
    """Compile the inline math pattern for one delimiter pair.

    Escaped delimiters inside the span do not close it. Single-character
    delimiters (like ``$``) also exclude the closing character from the
    content. The closing delimiter must be followed by whitespace, a comma,
    a period, or the end of the text.
    """
    left = re.escape(delimiter.left)
    right = re.escape(delimiter.right)
    if delimiter.left.startswith("\\") or len(delimiter.left) > 1:
        content = r"[^\r\n]"
    else:
        content = r"[^" + right + r"\r\n]"
    return re.compile(
        left
        + r"(?![\r\n])((?:\\"
        + right
        + r"|\\"
        + left
        + r"|"
        + content
        + r")+?)"
        + right
        + r"(?![^\s,.])"
    )


class SpecialParsingMixin:
    """Math, escape, emoji, typographer and smartypants rules.

    Required Host Attributes:
        - _config: MarkdownConfig

    """

    _config: MarkdownConfig

    def _match_inline_math(self, text: str) -> re.Match[str] | None:
        for delimiter in self._config.math.inline.delimiters:
            if match := inline_math_pattern(delimiter).match(text):
                return match
        return None

    def _inline_math_enabled(self) -> bool:
        math = self._config.math
        return math.enabled and math.inline.enabled

    def _inline_math_notation(self, excerpt: Excerpt) -> Inline | None:
        if not self._inline_math_enabled() or len(excerpt.text) < 2:
            return None
        if excerpt.before not in WHITESPACE_OR_EMPTY:
            return None
        match = self._match_inline_math(excerpt.text)
        if match is None:
            return None
        return Inline(extent=match.end(), element=Element(text=match.group(0)))

    def _inline_escape_sequence(self, excerpt: Excerpt) -> Inline | None:
        text = excerpt.text
        if len(text) < 2 or text[1] not in ESCAPABLE:
            return None
        if self._inline_math_enabled() and self._match_inline_math(text) is not None:
            return None
        return Inline(extent=2, element=Element(text=text[1]))

    def _inline_emoji(self, excerpt: Excerpt) -> Inline | None:
        if not self._config.emojis or excerpt.before not in WHITESPACE_OR_EMPTY:
            return None
        match = _EMOJI_RE.match(excerpt.text)
        if match is None:
            return None
        glyph = EMOJI.get(match.group(1))
        if glyph is None:
            return None
        return Inline(extent=match.end(), element=Element(text=glyph))

    def _inline_typographer(self, excerpt: Excerpt) -> Inline | None:
        if not self._config.typographer:
            return None
        match = _TYPOGRAPHER_RE.search(excerpt.context, excerpt.position)
        if match is None:
            return None

        smarty = self._config.smarty
        if smarty.enabled and smarty.smart_ellipses:
            ellipsis = html.unescape(smarty.substitutions.get("ellipses", "..."))
        else:
            ellipsis = "..."

        text = match.group(0)
        for pattern, replacement in _TYPOGRAPHER_SYMBOLS:
            text = pattern.sub(replacement, text)
        for pattern in _TYPOGRAPHER_ELLIPSES:
            text = pattern.sub(lambda _: ellipsis, text)

        return Inline(extent=len(match.group(0)), position=match.start(), element=Element(text=text))

    def _inline_smartypants(self, excerpt: Excerpt) -> Inline | None:
        smarty = self._config.smarty
        if not smarty.enabled:
            return None
        match = _SMARTYPANTS_RE.search(excerpt.context, excerpt.position)
        if match is None:
            return None

        parts = [group for group in match.groups() if group]
        opening = parts[0]
        substitutions = smarty.substitutions
        word_boundary = not excerpt.before.strip()

        def glyph(name: str) -> str:
            return html.unescape(substitutions.get(name, ""))

        if opening == "``" and smarty.smart_backticks:
            if not word_boundary:
                return None
            text = glyph("left-double-quote") + parts[1] + glyph("right-double-quote")
        elif opening == '"' and smarty.smart_quotes:
            if not word_boundary:
                return None
            text = glyph("left-double-quote") + parts[1] + glyph("right-double-quote")
        elif opening == "'" and smarty.smart_quotes:
            if not word_boundary:
                return None
            text = glyph("left-single-quote") + parts[1] + glyph("right-single-quote")
        elif opening == "<<" and smarty.smart_angled_quotes:
            if not word_boundary:
                return None
            text = glyph("left-angle-quote") + parts[1] + glyph("right-angle-quote")
        elif opening == "---" and smarty.smart_dashes:
            text = glyph("mdash")
        elif opening == "--" and smarty.smart_dashes:
            text = glyph("ndash")
        elif opening == "..." and smarty.smart_ellipses:
            text = glyph("ellipses")
        else:
            return None

        return Inline(extent=len(match.group(0)), position=match.start(), element=Element(text=text))
