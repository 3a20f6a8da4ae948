"""Text processing utilities for mdextended.

Provides HTML escaping, tag stripping and the building blocks of heading
anchor generation (transliteration and anchor sanitizing).

Example:
    >>> from mdextended.utils.text import sanitize_anchor
    >>> sanitize_anchor("hello, world!")
    'hello-world'
"""

from __future__ import annotations

import html
import re
import unicodedata
from itertools import groupby

_TAG_RE = re.compile(r"<[^>]*>")

_TRANSLITERATION: dict[str, str] = {
    # Latin
    "À": "A", "Á": "A", "Â": "A", "Ã": "A", "Ä": "A", "Å": "AA", "Æ": "AE", "Ç": "C",
    "È": "E", "É": "E", "Ê": "E", "Ë": "E", "Ì": "I", "Í": "I", "Î": "I", "Ï": "I",
    "Ð": "D", "Ñ": "N", "Ò": "O", "Ó": "O", "Ô": "O", "Õ": "O", "Ö": "O", "Ő": "O",
    "Ø": "OE", "Ù": "U", "Ú": "U", "Û": "U", "Ü": "U", "Ű": "U", "Ý": "Y", "Þ": "TH",
    "ß": "ss",
    "à": "a", "á": "a", "â": "a", "ã": "a", "ä": "a", "å": "aa", "æ": "ae", "ç": "c",
    "è": "e", "é": "e", "ê": "e", "ë": "e", "ì": "i", "í": "i", "î": "i", "ï": "i",
    "ð": "d", "ñ": "n", "ò": "o", "ó": "o", "ô": "o", "õ": "o", "ö": "o", "ő": "o",
    "ø": "oe", "ù": "u", "ú": "u", "û": "u", "ü": "u", "ű": "u", "ý": "y", "þ": "th",
    "ÿ": "y",

    # Latin symbols
    "©": "(c)", "®": "(r)", "™": "(tm)",

    # Greek
    "Α": "A", "Β": "B", "Γ": "G", "Δ": "D", "Ε": "E", "Ζ": "Z", "Η": "H", "Θ": "TH",
    "Ι": "I", "Κ": "K", "Λ": "L", "Μ": "M", "Ν": "N", "Ξ": "X", "Ο": "O", "Π": "P",
    "Ρ": "R", "Σ": "S", "Τ": "T", "Υ": "Y", "Φ": "F", "Χ": "X", "Ψ": "PS", "Ω": "O",
    "Ά": "A", "Έ": "E", "Ί": "I", "Ό": "O", "Ύ": "Y", "Ή": "H", "Ώ": "O", "Ϊ": "I",
    "Ϋ": "Y",
    "α": "a", "β": "b", "γ": "g", "δ": "d", "ε": "e", "ζ": "z", "η": "h", "θ": "th",
    "ι": "i", "κ": "k", "λ": "l", "μ": "m", "ν": "n", "ξ": "x", "ο": "o", "π": "p",
    "ρ": "r", "σ": "s", "τ": "t", "υ": "y", "φ": "f", "χ": "x", "ψ": "ps", "ω": "o",
    "ά": "a", "έ": "e", "ί": "i", "ό": "o", "ύ": "y", "ή": "h", "ώ": "o", "ς": "s",
    "ϊ": "i", "ΰ": "y", "ϋ": "y", "ΐ": "i",

    # Turkish
    "Ş": "S", "İ": "I", "Ğ": "G",
    "ş": "s", "ı": "i", "ğ": "g",

    # Russian
    "А": "A", "Б": "B", "В": "V", "Г": "G", "Д": "D", "Е": "E", "Ё": "Yo", "Ж": "Zh",
    "З": "Z", "И": "I", "Й": "J", "К": "K", "Л": "L", "М": "M", "Н": "N", "О": "O",
    "П": "P", "Р": "R", "С": "S", "Т": "T", "У": "U", "Ф": "F", "Х": "Kh", "Ц": "Ts",
    "Ч": "Ch", "Ш": "Sh", "Щ": "Shch", "Ъ": "U", "Ы": "Y", "Ь": "", "Э": "E", "Ю": "Yu",
    "Я": "Ya",
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e", "ё": "yo", "ж": "zh",
    "з": "z", "и": "i", "й": "j", "к": "k", "л": "l", "м": "m", "н": "n", "о": "o",
    "п": "p", "р": "r", "с": "s", "т": "t", "у": "u", "ф": "f", "х": "kh", "ц": "ts",
    "ч": "ch", "ш": "sh", "щ": "shch", "ъ": "u", "ы": "y", "ь": "", "э": "e", "ю": "yu",
    "я": "ya",

    # Ukrainian
    "Є": "Ye", "І": "I", "Ї": "Yi", "Ґ": "G",
    "є": "ye", "і": "i", "ї": "yi", "ґ": "g",

    # Czech
    "Č": "C", "Ď": "D", "Ě": "E", "Ň": "N", "Ř": "R", "Š": "S", "Ť": "T", "Ů": "U",
    "Ž": "Z",
    "č": "c", "ď": "d", "ě": "e", "ň": "n", "ř": "r", "š": "s", "ť": "t", "ů": "u",
    "ž": "z",

    # Polish
    "Ą": "A", "Ć": "C", "Ę": "E", "Ł": "L", "Ń": "N", "Ś": "S", "Ź": "Z",
    "Ż": "Z",
    "ą": "a", "ć": "c", "ę": "e", "ł": "l", "ń": "n", "ś": "s", "ź": "z",
    "ż": "z",

    # Latvian
    "Ā": "A", "Ē": "E", "Ģ": "G", "Ī": "I", "Ķ": "K", "Ļ": "L", "Ņ": "N", "Ū": "U",
    "ā": "a", "ē": "e", "ģ": "g", "ī": "i", "ķ": "k", "ļ": "l", "ņ": "n", "ū": "u",
}

_TRANSLITERATION_TABLE = str.maketrans(_TRANSLITERATION)


def escape_html(text: str, quote: bool = False) -> str:
    """Escape HTML special characters.

    Text content only needs ``&``, ``<`` and ``>`` escaped; attribute values
    also need quotes escaped.

    Args:
        text: Raw text
        quote: Also escape single and double quotes (for attribute values)

    Returns:
        HTML-escaped text
    """
    return html.escape(text, quote=quote)


def strip_tags(markup: str) -> str:
    """Remove HTML tags from markup, keeping text and entities."""
    return _TAG_RE.sub("", markup)


def normalize(text: str) -> str:
    """Normalize text to NFC so composed and decomposed forms compare equal."""
    return unicodedata.normalize("NFC", text)


def transliterate(text: str) -> str:
    """Transliterate Latin diacritics, Greek and Cyrillic letters to ASCII.

    Characters without a mapping are kept as-is.

    Example:
        >>> transliterate("Crème Brûlée")
        'Creme Brulee'
    """
    return text.translate(_TRANSLITERATION_TABLE)


def _is_anchor_char(char: str) -> bool:
    category = unicodedata.category(char)
    return category[0] == "L" or category == "Nd"


def sanitize_anchor(text: str, delimiter: str = "-") -> str:
    """Reduce text to letters and decimal digits joined by a delimiter.

    Every run of characters that are neither letters nor decimal digits
    (underscores, punctuation, symbols, fractions and other numerics) becomes
    a single delimiter; repeated delimiters collapse and leading/trailing ones
    are trimmed.

    Example:
        >>> sanitize_anchor("50% off ½")
        '50-off'

    Args:
        text: Anchor text (already lowercased/transliterated as configured)
        delimiter: Separator placed between words

    Returns:
        Sanitized anchor text (may be empty)
    """
    text = "".join(
        "".join(chars) if keep else delimiter
        for keep, chars in groupby(text, key=_is_anchor_char)
    )
    if not delimiter:
        return text
    text = re.sub(f"(?:{re.escape(delimiter)}){{2,}}", delimiter, text)
    return text.strip(delimiter)
