"""
Effective base URL for pages that carry no ``<base>`` tag.

A page URL such as ``https://example.com/docs/guide`` is ambiguous: relative
links on it resolve differently depending on whether ``guide`` is a file
(``/docs/``) or a directory (``/docs/guide/``).  The answer is decided by an
ordered chain of strategies, each returning a :class:`PathKind` or ``None``
when it cannot tell.  The first definite answer wins; if none answers the
URL is treated as a directory.

Strategies
----------
1. ``_from_path_shape``  – trailing ``/`` or empty path → directory
2. ``_from_extension``   – recognised file extension → file
3. ``_from_probe``       – ``HEAD`` request, Content-Type → classifier
"""

from __future__ import annotations

import urllib.parse
from collections.abc import Callable

import requests
from urllib3.exceptions import LocationValueError

from link_checker.config import RECOGNIZED_EXTENSIONS
from link_checker.resolve.mime import PathKind, classify, normalise_mime
from link_checker.utils.log import log
from link_checker.utils.url import (
    ensure_trailing_slash,
    last_segment,
    parent_directory,
)

Strategy = Callable[[str, requests.Session, float], "PathKind | None"]


def _from_path_shape(url: str, session: requests.Session, timeout: float) -> PathKind | None:
    path = urllib.parse.urlsplit(url).path
    if not path or path.endswith("/"):
        return PathKind.DIRECTORY
    return None


def extension_of(segment: str) -> str | None:
    """Lower-cased text after the last ``.`` of *segment*, if any."""
    if "." not in segment:
        return None
    return segment.rpartition(".")[2].lower()


def _from_extension(url: str, session: requests.Session, timeout: float) -> PathKind | None:
    ext = extension_of(last_segment(url))
    if ext and ext in RECOGNIZED_EXTENSIONS:
        return PathKind.FILE
    return None


def probe_content_type(url: str, session: requests.Session, timeout: float) -> str | None:
    """
    ``HEAD`` *url* and return its normalised MIME type.

    ``None`` on transport errors, HTTP status >= 400, or a missing
    Content-Type header.
    """
    try:
        resp = session.head(url, timeout=timeout, allow_redirects=True)
    except (requests.RequestException, LocationValueError) as exc:
        log.debug("[PROBE] %s – %s", url, exc)
        return None
    if resp.status_code >= 400:
        log.debug("[PROBE] %s – HTTP %s", url, resp.status_code)
        return None
    content_type = resp.headers.get("Content-Type")
    if not content_type:
        log.debug("[PROBE] %s – no Content-Type", url)
        return None
    return normalise_mime(content_type)


def _from_probe(url: str, session: requests.Session, timeout: float) -> PathKind | None:
    mime = probe_content_type(url, session, timeout)
    if mime is None:
        return None
    return classify(mime)


STRATEGIES: tuple[Strategy, ...] = (_from_path_shape, _from_extension, _from_probe)


def classify_url(url: str, session: requests.Session, timeout: float) -> PathKind:
    """Run the strategy chain for *url*; default to ``DIRECTORY``."""
    for strategy in STRATEGIES:
        kind = strategy(url, session, timeout)
        if kind is not None:
            return kind
    return PathKind.DIRECTORY


def resolve_base(url: str, session: requests.Session, timeout: float) -> str:
    """
    Return the base against which relative links on *url* resolve.

    Files resolve against their parent directory, directories against
    themselves with a trailing ``/``.  Query string and fragment are kept.
    Never raises for network problems.
    """
    kind = classify_url(url, session, timeout)
    if kind is PathKind.FILE:
        base = parent_directory(url)
    else:
        base = ensure_trailing_slash(url)
    log.debug("[BASE] %s → %s (%s)", url, base, kind.value)
    return base
