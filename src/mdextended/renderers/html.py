"""HTML renderer using StringBuilder pattern.

Turns an element tree into markup in a single walk.

Element rendering:
    - A named element renders as a tag; without content it is a void tag
      (``<hr />``, ``<input ... />``)
    - Content is the element's children, its escaped text or its raw HTML
    - Attributes render in insertion order; None values are skipped

Line breaks between siblings:
    Each element declares whether it is separated from its siblings by a
    newline (``autobreak``, default: named elements are, bare text is not).
    A newline is written before an element only when both it and the
    previous element ask for one, and after the last element when it asks
    for one. Block siblings therefore sit on their own lines while inline
    runs stay on one line.

Thread Safety:
The renderer holds no per-render state; one instance may be shared.
"""

from __future__ import annotations

from mdextended.errors import RenderError
from mdextended.nodes import Element
from mdextended.stringbuilder import StringBuilder
from mdextended.utils.text import escape_html


class HtmlRenderer:
    """Render element trees to HTML.

    Usage:
        >>> renderer = HtmlRenderer()
        >>> renderer.render([Element(name="p", children=[Element(text="a < b")])])
        '<p>a &lt; b</p>'

    """

    __slots__ = ()

    def render(self, elements: list[Element]) -> str:
        """Render top-level elements, trimming the surrounding newlines."""
        sb = StringBuilder()
        self._render_elements(elements, sb)
        return sb.build().strip("\n")

    def render_element(self, element: Element) -> str:
        """Render a single element without sibling separators."""
        sb = StringBuilder()
        self._render_element(element, sb)
        return sb.build()

    def _render_elements(self, elements: list[Element], sb: StringBuilder) -> None:
        autobreak = True
        for element in elements:
            wants_break = element.autobreak if element.autobreak is not None else element.name is not None
            autobreak = wants_break if autobreak else False
            if autobreak:
                sb.append("\n")
            self._render_element(element, sb)
            autobreak = wants_break
        if autobreak:
            sb.append("\n")

    def _render_element(self, element: Element, sb: StringBuilder) -> None:
        if element.line is not None:
            raise RenderError(f"Element <{element.name or 'text'}> reached the renderer with unresolved inline content")

        has_content = (
            element.children is not None or element.text is not None or element.raw_html is not None
        )

        if element.name is not None:
            sb.append("<").append(element.name)
            if element.attributes:
                for name, value in element.attributes.items():
                    if value is None:
                        continue
                    sb.append(f' {name}="{escape_html(str(value), quote=True)}"')
            if not has_content:
                sb.append(" />")
                return
            sb.append(">")

        if element.children is not None:
            self._render_elements(element.children, sb)
        elif element.text is not None:
            sb.append(escape_html(element.text))
        elif element.raw_html is not None:
            sb.append(element.raw_html)

        if element.name is not None:
            sb.append("</").append(element.name).append(">")
