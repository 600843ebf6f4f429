"""
URL resolution, same-origin and path helpers.
"""

import re
import urllib.parse
from collections.abc import Iterable

# References that never name a fetchable resource.
_SKIP_PREFIXES = ("#", "javascript:", "mailto:")


def resolve_url(href: str, base: str) -> str | None:
    """
    Resolve *href* against *base* and return the absolute URL.

    Returns ``None`` for empty strings, fragment-only references,
    ``javascript:`` and ``mailto:`` links, and references that do not parse.
    Other schemes (``tel:``, ``ftp:`` …) pass through unchanged.
    """
    if not href or href.startswith(_SKIP_PREFIXES):
        return None
    try:
        urllib.parse.urlsplit(href)
        return urllib.parse.urljoin(base, href)
    except ValueError:
        return None


def host_of(url: str) -> str:
    """Host (and port) of *url*, without any ``user:pass@`` prefix."""
    return urllib.parse.urlsplit(url).netloc.rpartition("@")[2]


def last_segment(url: str) -> str:
    """Final path segment of *url* (empty for directory URLs)."""
    return urllib.parse.urlsplit(url).path.rpartition("/")[2]


def _with_path(url: str, path: str) -> str:
    parts = urllib.parse.urlsplit(url)
    return urllib.parse.urlunsplit(parts._replace(path=path))


def ensure_trailing_slash(url: str) -> str:
    """Append ``/`` to the path of *url* unless it already ends with one.

    Query string and fragment are kept as they are.
    """
    path = urllib.parse.urlsplit(url).path
    if path.endswith("/"):
        return url
    return _with_path(url, path + "/")


def parent_directory(url: str) -> str:
    """Drop the last path segment of *url*, keeping the trailing ``/``."""
    path = urllib.parse.urlsplit(url).path
    head, sep, _ = path.rpartition("/")
    return _with_path(url, head + sep if sep else "/")


def should_exclude(url: str, patterns: Iterable[re.Pattern]) -> bool:
    """True if any of *patterns* matches anywhere in *url*."""
    return any(pattern.search(url) for pattern in patterns)
