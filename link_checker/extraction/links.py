"""
Same-origin link extraction from a single HTML page.
"""

import urllib.parse

import requests
from bs4 import ParserRejectedMarkup
from urllib3.exceptions import LocationValueError

from link_checker.errors import LinkExtractionError
from link_checker.extraction.html_parser import find_base_href, iter_anchor_hrefs, parse_html
from link_checker.resolve.base import resolve_base
from link_checker.utils.log import log
from link_checker.utils.url import host_of, resolve_url


def _base_from_tag(base_href: str | None, current_url: str) -> str | None:
    if base_href is None:
        return None
    try:
        base = urllib.parse.urljoin(current_url, base_href)
    except ValueError:
        log.debug("[BASE] ignoring malformed <base href=%r> on %s", base_href, current_url)
        return None
    log.debug("[BASE] %s → %s (<base> tag)", current_url, base)
    return base


def extract_links_from_page(
    session: requests.Session,
    page_url: str,
    current_url: str,
    site_base: str,
    timeout: float,
) -> list[str]:
    """
    Fetch *page_url* and return the absolute URLs of its anchors.

    Relative hrefs resolve against the page's ``<base href>`` (itself
    resolved against *current_url*) or, without one, against the base
    computed by :func:`resolve_base` for *current_url*.  Only links whose
    host equals the host of *site_base* are returned.  Document order is
    kept and duplicates are left in.

    Raises :class:`LinkExtractionError` when the page cannot be fetched,
    answers with a status other than 200, or cannot be parsed.
    """
    try:
        resp = session.get(page_url, timeout=timeout)
    except (requests.RequestException, LocationValueError) as exc:
        raise LinkExtractionError(page_url, str(exc)) from exc

    if resp.status_code != 200:
        raise LinkExtractionError(page_url, f"page returned status {resp.status_code}")

    try:
        soup = parse_html(resp.content)
    except ParserRejectedMarkup as exc:
        raise LinkExtractionError(page_url, f"unparseable HTML: {exc}") from exc

    effective_base = _base_from_tag(find_base_href(soup), current_url)
    if effective_base is None:
        effective_base = resolve_base(current_url, session, timeout)

    site_host = host_of(site_base)
    links: list[str] = []
    for href in iter_anchor_hrefs(soup):
        absolute = resolve_url(href, effective_base)
        if not absolute:
            continue
        if host_of(absolute) == site_host:
            links.append(absolute)
    return links
