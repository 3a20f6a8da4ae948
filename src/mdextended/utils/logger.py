"""Namespaced loggers for the conversion pipeline.

Every module logs under the ``mdextended`` hierarchy, so one call such as
``logging.getLogger("mdextended").setLevel(logging.DEBUG)`` shows why a
block was left unterminated or why an anchor got a suffix. Messages are
emitted at debug level only; handlers and formatting belong to the host
application.

Example:
    >>> from mdextended.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Converting %d lines", 12)
"""

from __future__ import annotations

import logging

ROOT_LOGGER = "mdextended"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the mdextended hierarchy.

    Module names already under the package are used as they are; anything
    else is nested below it.

    >>> get_logger("toc").name
    'mdextended.toc'
    >>> get_logger("mdextended.parser").name
    'mdextended.parser'
    """
    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
