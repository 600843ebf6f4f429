"""
Content-Type → file/directory classification.
"""

import enum

from link_checker.config import DIRECTORY_MIME_TYPES, FILE_MIME_TYPES


class PathKind(enum.Enum):
    """How the last path segment of a URL behaves for relative links."""

    FILE = "file"
    DIRECTORY = "directory"


def normalise_mime(content_type: str) -> str:
    """``"Text/HTML; charset=utf-8"`` → ``"text/html"``."""
    return content_type.split(";")[0].strip().lower()


def classify(mime_type: str) -> PathKind:
    """
    Map a normalised MIME type to a :class:`PathKind`.

    Unknown types (including ``""``) count as directories: most unlisted
    content on the web is page-like.
    """
    if mime_type in DIRECTORY_MIME_TYPES:
        return PathKind.DIRECTORY
    if mime_type in FILE_MIME_TYPES:
        return PathKind.FILE
    return PathKind.DIRECTORY
