"""Element tree nodes for mdextended.

The parser builds a tree of ``Element`` nodes, one shape for every construct.
An element has a tag name (or none, for bare text runs) plus exactly one kind
of content:

- ``text``: literal text, HTML-escaped on render
- ``raw_html``: markup emitted verbatim
- ``children``: nested elements
- ``line``: inline source not yet run through the inline dispatch loop

``line`` is resolved into ``children`` by the parser after every block has been
identified, so reference definitions and footnotes declared later in the
document are visible to inline rules. Elements are mutable until they reach
the renderer: heading anchors and table spans are attached in place.

Node shapes:
    Element(name="p", line="Hello **world**")        # before inline resolution
    Element(name="p", children=[Element(text="Hello "), Element(name="strong", ...)])
    Element(name="hr")                               # void element, renders <hr />
    Element(raw_html="<!-- note -->", autobreak=True)

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mdextended.dispatch import InlineType

# =============================================================================
# Element
# =============================================================================


@dataclass(slots=True)
class Element:
    """A node of the element tree.

    Attributes:
        name: Tag name; None renders the content without a wrapper
        attributes: Tag attributes; None values are skipped on render
        text: Literal text content (escaped on render)
        raw_html: Verbatim markup content
        children: Nested elements
        line: Inline source awaiting the dispatch loop
        non_nestables: Inline rules forbidden inside this element's content
        autobreak: Separate from siblings with newlines (defaults to "has a name")

    """

    name: str | None = None
    attributes: dict[str, str | int | None] | None = None
    text: str | None = None
    raw_html: str | None = None
    children: list[Element] | None = None
    line: str | None = None
    non_nestables: frozenset[InlineType] = field(default_factory=frozenset)
    autobreak: bool | None = None

    def set_attribute(self, name: str, value: str | int | None) -> None:
        """Set one attribute, creating the attribute dict on demand."""
        if self.attributes is None:
            self.attributes = {}
        self.attributes[name] = value

    def get_attribute(self, name: str) -> str | int | None:
        if self.attributes is None:
            return None
        return self.attributes.get(name)


# =============================================================================
# Inline match result
# =============================================================================


@dataclass(slots=True)
class Inline:
    """Result of an inline rule that claimed a span of text.

    Attributes:
        extent: Number of characters consumed, counted from ``position``
        element: The node produced for the span
        position: Explicit start of the span in the scanned text; None means
            the trigger position. A position after the trigger is rejected.

    """

    extent: int
    element: Element
    position: int | None = None
