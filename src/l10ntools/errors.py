"""Exceptions raised by the conversion tools."""

from pathlib import Path
from typing import Optional


class L10nError(Exception):
    """Base class for all tool errors."""


class ParseError(L10nError, ValueError):
    """Raised when a .properties, XML or manifest document is malformed.

    Attributes:
        path: File the content came from, when known.
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class FormatError(L10nError, ValueError):
    """Raised when a filename does not follow the expected naming convention."""
