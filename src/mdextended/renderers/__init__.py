"""mdextended renderers.

Renderers convert element trees into output formats.

Available Renderers:
- HtmlRenderer: Renders element trees to HTML using StringBuilder pattern

"""

from mdextended.renderers.html import HtmlRenderer

__all__ = ["HtmlRenderer"]
