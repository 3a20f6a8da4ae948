"""Exception classes for mdextended.

Grammar mismatches are never errors: an inline or block rule that does not
match simply yields to the next rule. Exceptions are reserved for caller
mistakes (bad configuration, bad ToC tag or format) and internal contract
violations.
"""

from __future__ import annotations


class MdExtendedError(Exception):
    """Base exception for all mdextended errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(MdExtendedError, ValueError):
    """Invalid configuration path or value.

    Raised at construction or by the offending setter call, never deferred.
    """

    def __init__(self, path: str, message: str) -> None:
        """Initialize configuration error.

        Args:
            path: Dotted configuration path (e.g., "emphasis.bold")
            message: Description of the problem
        """
        self.path = path
        super().__init__(f"Setting '{path}': {message}")


class TocError(MdExtendedError, ValueError):
    """Malformed table-of-contents tag or unknown ToC output format."""

    pass


class RenderError(MdExtendedError):
    """Error during HTML rendering.

    Raised when the renderer receives an element whose inline content was
    never resolved by the parser.
    """

    pass
