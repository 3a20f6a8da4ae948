"""Heading anchors and the table of contents.

Three pieces, all scoped to one document conversion:

- ``AnchorFactory`` turns heading text into a unique anchor id, either with a
  caller-supplied callback or with the default pipeline:
  lowercase -> regex replacements -> NFC -> transliteration -> sanitize.
- ``TableOfContents`` accumulates Heading Records and the nested Markdown list
  the ToC is rendered from.
- ``TocPlaceholder`` hides the ToC tag from the parser behind a salted hash and
  restores it afterwards, so no grammar rule can rewrite the tag.

Deduplication:
    The first occurrence of an anchor is kept as-is. Later occurrences, and
    any anchor on the blacklist, get ``-1``, ``-2``, ... appended, skipping
    suffixed forms that are blacklisted or already emitted.

    >>> anchors = AnchorFactory(AutoAnchorsConfig())
    >>> [anchors.create("Header") for _ in range(3)]
    ['header', 'header-1', 'header-2']

"""

from __future__ import annotations

import hashlib
import json
import re
from collections.abc import Callable, Iterable
from dataclasses import asdict, dataclass
from typing import TypeAlias

from mdextended.config import AutoAnchorsConfig, validate_toc_tag
from mdextended.errors import ConfigError, TocError
from mdextended.utils.logger import get_logger
from mdextended.utils.text import normalize, sanitize_anchor, transliterate

logger = get_logger(__name__)

AnchorCallback: TypeAlias = Callable[[str], str]

MARKUP_FORMATS = frozenset({"markup", "string"})
STRUCTURED_FORMATS = frozenset({"structured", "json"})


# =============================================================================
# Anchors
# =============================================================================


def slugify(text: str, config: AutoAnchorsConfig) -> str:
    """Run heading text through the default anchor pipeline (no deduplication).

    Raises:
        ConfigError: If a configured replacement pattern is not a valid regex
    """
    if config.lowercase:
        text = text.lower()
    for pattern, replacement in config.replacements.items():
        try:
            text = re.sub(pattern, replacement, text)
        except re.error as e:
            raise ConfigError("headings.auto_anchors.replacements", f"invalid pattern {pattern!r}: {e}") from e
    text = normalize(text)
    if config.transliterate:
        text = transliterate(text)
    return sanitize_anchor(text, config.delimiter)


class AnchorRegistry:
    """Anchor ids emitted in one document, with per-base suffix counters."""

    __slots__ = ("_blacklist", "_counters", "_used")

    def __init__(self, blacklist: Iterable[str] = ()) -> None:
        self._blacklist = frozenset(blacklist)
        self._used: set[str] = set()
        self._counters: dict[str, int] = {}

    def __contains__(self, anchor: str) -> bool:
        return anchor in self._used

    def reserve(self, anchor: str) -> None:
        """Mark an explicitly supplied id as taken."""
        self._used.add(anchor)

    def unique(self, anchor: str) -> str:
        """Return ``anchor`` or its first free ``-N`` form, and mark it taken."""
        if anchor not in self._used and anchor not in self._blacklist:
            self._used.add(anchor)
            return anchor

        count = self._counters.get(anchor, 0)
        while True:
            count += 1
            candidate = f"{anchor}-{count}"
            if candidate not in self._used and candidate not in self._blacklist:
                break
        self._counters[anchor] = count
        self._used.add(candidate)
        logger.debug("Anchor %r taken, using %r", anchor, candidate)
        return candidate


class AnchorFactory:
    """Create deduplicated heading anchors for one document.

    Args:
        config: ``headings.auto_anchors`` settings
        callback: Replaces the default pipeline; its results are deduplicated too

    """

    __slots__ = ("_callback", "_config", "registry")

    def __init__(self, config: AutoAnchorsConfig, callback: AnchorCallback | None = None) -> None:
        self._config = config
        self._callback = callback
        self.registry = AnchorRegistry(config.blacklist)

    def create(self, text: str) -> str | None:
        """Anchor for a heading's source text; None when auto anchors are off or the text is empty."""
        if not self._config.enabled:
            return None
        if self._callback is not None:
            anchor = str(self._callback(text))
        else:
            anchor = slugify(text, self._config)
        if not anchor:
            return None
        return self.registry.unique(anchor)

    def reserve(self, anchor: str) -> None:
        self.registry.reserve(anchor)


# =============================================================================
# Table of contents
# =============================================================================


@dataclass(frozen=True, slots=True)
class HeadingRecord:
    """A heading listed in the table of contents.

    Attributes:
        text: Plain text of the heading (inline markup rendered, tags stripped)
        level: Heading depth, 1 to 6
        id: Anchor id ("" when the heading has none)

    """

    text: str
    level: int
    id: str


class TableOfContents:
    """Heading Records of one document plus the nested list they render to.

    The first recorded heading fixes the baseline: it and every heading at
    its level or above sit at depth one, deeper headings are indented one
    step per level below it.
    """

    __slots__ = ("_first_level", "_lines", "records")

    def __init__(self) -> None:
        self.records: list[HeadingRecord] = []
        self._lines: list[str] = []
        self._first_level = 0

    def __len__(self) -> int:
        return len(self.records)

    def add(self, record: HeadingRecord) -> None:
        if not self._first_level:
            self._first_level = record.level
        depth = max(1, record.level - (self._first_level - 1))
        self.records.append(record)
        self._lines.append(f"{'  ' * depth}- [{record.text}](#{record.id})\n")

    @property
    def markdown(self) -> str:
        """The ToC as a nested Markdown list of anchor links."""
        return "".join(self._lines)

    def to_json(self) -> str:
        return json.dumps([asdict(record) for record in self.records])


def normalize_format(format: str) -> str:
    """Map a ToC output format name to "markup" or "structured".

    Raises:
        TocError: If the format is unknown
    """
    key = str(format).lower()
    if key in MARKUP_FORMATS:
        return "markup"
    if key in STRUCTURED_FORMATS:
        return "structured"
    raise TocError(f"Unknown ToC format {format!r}; expected 'markup' or 'structured'")


# =============================================================================
# Placeholder
# =============================================================================


class TocPlaceholder:
    """Swap the ToC tag for a salted hash while the document is parsed.

    Args:
        tag: The placeholder tag, e.g. "[toc]"
        salt: Per-engine secret mixed into the hash

    """

    __slots__ = ("hashed", "tag")

    def __init__(self, tag: str, salt: str) -> None:
        self.tag = validate_toc_tag(tag)
        self.hashed = hashlib.sha256(f"{salt}{tag}".encode()).hexdigest()

    def encode(self, text: str) -> str:
        if self.tag not in text:
            return text
        return text.replace(self.tag, self.hashed)

    def decode(self, text: str) -> str:
        if self.hashed not in text:
            return text
        return text.replace(self.hashed, self.tag)

    def substitute(self, html: str, toc_id: str, toc_markup: str) -> str:
        """Replace the standalone tag paragraph with the ToC container."""
        container = f'<div id="{toc_id}">{toc_markup}</div>'
        return html.replace(f"<p>{self.tag}</p>", container)


__all__ = [
    "AnchorCallback",
    "AnchorFactory",
    "AnchorRegistry",
    "HeadingRecord",
    "TableOfContents",
    "TocPlaceholder",
    "normalize_format",
    "slugify",
]
