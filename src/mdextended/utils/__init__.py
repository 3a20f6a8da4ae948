"""Shared utilities: logging and text helpers."""

from mdextended.utils.logger import get_logger
from mdextended.utils.text import escape_html, normalize, sanitize_anchor, strip_tags, transliterate

__all__ = [
    "escape_html",
    "get_logger",
    "normalize",
    "sanitize_anchor",
    "strip_tags",
    "transliterate",
]
