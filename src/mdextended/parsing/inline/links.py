"""Inline rules of the base grammar.

Code spans, links and images (inline and reference style), bare and
angle-bracket autolinks, inline HTML, footnote markers and the literal
fallback for reserved characters.

Link syntax:
    [text](url "title")
    [text][label]  /  [text][]  /  [text]
    [text](url){#id .class}      (special attributes)
    ![alt](src)
    <https://example.com>  <user@example.com>  https://example.com

"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, NamedTuple

from mdextended.dispatch import InlineType
from mdextended.nodes import Element, Inline

if TYPE_CHECKING:
    from mdextended.config import MarkdownConfig
    from mdextended.excerpt import Excerpt
    from mdextended.parsing.blocks.extra import Footnote

_CODE_RE = re.compile(r"(`++)[ ]*+(.+?)[ ]*+(?<!`)\1(?!`)", re.S)
_CODE_NEWLINE_RE = re.compile(r"[ ]*+\n")

_INLINE_DESTINATION_RE = re.compile(
    r"""[(]\s*+((?:[^ ()]++|[(][^ )]+[)])++)(?:[ ]+("[^"]*+"|'[^']*+'))?\s*+[)]"""
)
_REFERENCE_LABEL_RE = re.compile(r"\s*\[(.*?)\]")
_LINK_ATTRIBUTES_RE = re.compile(r"[ ]*{((?:[#.][-\w]+[ ]*)+)}")

_URL_RE = re.compile(r"\bhttps?+:/{2}[^\s<]+\b/*+", re.I)
_URL_TAG_RE = re.compile(r"<(\w++:/{2}[^ >]++)>", re.I)

_HOSTNAME_LABEL = r"[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
_EMAIL_TAG_RE = re.compile(
    r"<((mailto:)?[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]++@"
    + _HOSTNAME_LABEL
    + r"(?:\."
    + _HOSTNAME_LABEL
    + r")*)>",
    re.I,
)

HTML_ATTRIBUTE = r"""[a-zA-Z_:][\w:.-]*+(?:\s*+=\s*+(?:[^"'=<>`\s]+|"[^"]*+"|'[^']*+'))?+"""
_MARKUP_CLOSING_RE = re.compile(r"</\w[\w-]*+[ ]*+>", re.S)
_MARKUP_COMMENT_RE = re.compile(r"<!---?[^>-](?:-?+[^-])*-->", re.S)
_MARKUP_OPENING_RE = re.compile(r"<\w[\w-]*+(?:[ ]*+" + HTML_ATTRIBUTE + r")*+[ ]*+/?>", re.S)

_ENTITY_RE = re.compile(r"&(#?+[0-9a-zA-Z]++);")
_FOOTNOTE_MARKER_RE = re.compile(r"\[\^(.+?)\]")

_LINK_NON_NESTABLES = frozenset({InlineType.URL, InlineType.LINK})


class LinkParts(NamedTuple):
    text: str
    href: str
    title: str | None
    attributes: dict[str, str | int | None]
    extent: int


def match_brackets(text: str) -> tuple[str, int] | None:
    """Match a balanced ``[...]`` group at the start of text.

    Backslash-escaped brackets do not count.

    Returns:
        (inner text, length of the whole group) or None
    """
    if not text.startswith("["):
        return None
    depth = 0
    index = 0
    while index < len(text):
        char = text[index]
        if char == "\\":
            index += 2
            continue
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth == 0:
                return text[1:index], index + 1
        index += 1
    return None


class LinkParsingMixin:
    """Links, images, autolinks, code spans, inline HTML and footnote markers.

    Required Host Attributes:
        - _config: MarkdownConfig
        - _references: dict[str, tuple[str, str | None]]
        - _footnotes: dict[str, Footnote]
        - _footnote_numbers: list[str]
        - parse_attribute_data(attribute_string) -> dict

    """

    _config: MarkdownConfig
    _references: dict[str, tuple[str, str | None]]
    _footnotes: dict[str, Footnote]
    _footnote_numbers: list[str]

    def _inline_code(self, excerpt: Excerpt) -> Inline | None:
        code = self._config.code
        if not (code.enabled and code.inline):
            return None
        match = _CODE_RE.match(excerpt.text)
        if match is None:
            return None
        text = _CODE_NEWLINE_RE.sub(" ", match.group(2))
        return Inline(extent=match.end(), element=Element(name="code", text=text))

    def _link_parts(self, text: str) -> LinkParts | None:
        brackets = match_brackets(text)
        if brackets is None:
            return None
        link_text, extent = brackets
        remainder = text[extent:]
        title: str | None = None

        if match := _INLINE_DESTINATION_RE.match(remainder):
            href = match.group(1)
            if match.group(2):
                title = match.group(2)[1:-1]
            extent += match.end()
        else:
            if label := _REFERENCE_LABEL_RE.match(remainder):
                definition = label.group(1) or link_text
                extent += label.end()
            else:
                definition = link_text
            reference = self._references.get(definition.lower())
            if reference is None:
                return None
            href, title = reference

        attributes: dict[str, str | int | None] = {}
        if self._config.special_attributes and (
            match := _LINK_ATTRIBUTES_RE.match(text[extent:])
        ):
            attributes = self.parse_attribute_data(match.group(1))
            extent += match.end()

        return LinkParts(link_text, href, title, attributes, extent)

    def _inline_link(self, excerpt: Excerpt) -> Inline | None:
        if not self._config.links.enabled:
            return None
        parts = self._link_parts(excerpt.text)
        if parts is None:
            return None
        element = Element(
            name="a",
            attributes={"href": parts.href, "title": parts.title, **parts.attributes},
            line=parts.text,
            non_nestables=_LINK_NON_NESTABLES,
        )
        return Inline(extent=parts.extent, element=element)

    def _inline_image(self, excerpt: Excerpt) -> Inline | None:
        if not self._config.images or len(excerpt.text) < 2 or excerpt.text[1] != "[":
            return None
        parts = self._link_parts(excerpt.text[1:])
        if parts is None:
            return None
        element = Element(
            name="img",
            attributes={"src": parts.href, "alt": parts.text, "title": parts.title, **parts.attributes},
        )
        return Inline(extent=parts.extent + 1, element=element)

    def _inline_url(self, excerpt: Excerpt) -> Inline | None:
        if not self._config.links.enabled:
            return None
        if len(excerpt.text) < 3 or excerpt.text[2] != "/":
            return None
        if "http" not in excerpt.context:
            return None
        match = _URL_RE.search(excerpt.context, excerpt.start)
        if match is None:
            return None
        url = match.group(0)
        return Inline(
            extent=len(url),
            position=match.start(),
            element=Element(name="a", attributes={"href": url}, text=url),
        )

    def _inline_url_tag(self, excerpt: Excerpt) -> Inline | None:
        if not self._config.links.enabled or ">" not in excerpt.text:
            return None
        match = _URL_TAG_RE.match(excerpt.text)
        if match is None:
            return None
        url = match.group(1)
        return Inline(
            extent=match.end(),
            element=Element(name="a", attributes={"href": url}, text=url),
        )

    def _inline_email_tag(self, excerpt: Excerpt) -> Inline | None:
        links = self._config.links
        if not (links.enabled and links.email_links) or ">" not in excerpt.text:
            return None
        match = _EMAIL_TAG_RE.match(excerpt.text)
        if match is None:
            return None
        address = match.group(1)
        href = address if match.group(2) else f"mailto:{address}"
        return Inline(
            extent=match.end(),
            element=Element(name="a", attributes={"href": href}, text=address),
        )

    def _inline_markup(self, excerpt: Excerpt) -> Inline | None:
        text = excerpt.text
        if not self._config.markup or ">" not in text or len(text) < 2:
            return None
        if text[1] == "/":
            match = _MARKUP_CLOSING_RE.match(text)
        elif text[1] == "!":
            match = _MARKUP_COMMENT_RE.match(text)
        elif text[1] != " ":
            match = _MARKUP_OPENING_RE.match(text)
        else:
            match = None
        if match is None:
            return None
        return Inline(extent=match.end(), element=Element(raw_html=match.group(0)))

    def _inline_special_character(self, excerpt: Excerpt) -> Inline | None:
        if excerpt.marker == "&" and (match := _ENTITY_RE.match(excerpt.text)):
            return Inline(extent=match.end(), element=Element(raw_html=match.group(0)))
        return Inline(extent=1, element=Element(text=excerpt.marker))

    def _inline_footnote_marker(self, excerpt: Excerpt) -> Inline | None:
        if not self._config.footnotes:
            return None
        match = _FOOTNOTE_MARKER_RE.match(excerpt.text)
        if match is None:
            return None
        name = match.group(1)
        footnote = self._footnotes.get(name)
        if footnote is None:
            return None

        footnote.count += 1
        if footnote.number is None:
            self._footnote_numbers.append(name)
            footnote.number = len(self._footnote_numbers)

        element = Element(
            name="sup",
            attributes={"id": f"fnref{footnote.count}:{name}"},
            children=[
                Element(
                    name="a",
                    attributes={"href": f"#fn:{name}", "class": "footnote-ref"},
                    text=str(footnote.number),
                    autobreak=False,
                )
            ],
        )
        return Inline(extent=match.end(), element=element)
