"""Character and tag sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (shared safely between parser instances)
- Module-level caching (no per-call allocation)

Usage:
    from mdextended.parsing.charsets import ESCAPABLE

    if char in ESCAPABLE:  # O(1) lookup
        ...
"""

# Characters a backslash turns into literal text. Covers the base grammar plus
# the dialect's own markers (marking, superscript, subscript, math, emoji).
ESCAPABLE: frozenset[str] = frozenset("\\`*_{}[]()>#+-.!|?\"'<=^~$:")

WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")

# Extended whitespace including empty string (for start-of-text checks)
WHITESPACE_OR_EMPTY: frozenset[str] = WHITESPACE | frozenset([""])

# Inline-level HTML tags; a line starting with one of these is not an HTML block
TEXT_LEVEL_ELEMENTS: frozenset[str] = frozenset(
    {
        "a", "abbr", "acronym", "b", "basefont", "bdo", "big", "blink", "br",
        "cite", "code", "del", "em", "font", "i", "ins", "kbd", "listing",
        "mark", "marquee", "nextid", "nobr", "q", "rp", "rt", "ruby", "s",
        "small", "spacer", "span", "strike", "strong", "sub", "sup", "time",
        "tt", "u", "var", "wbr", "xm",
    }
)
