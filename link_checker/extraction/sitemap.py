"""
XML sitemap loading.

Only the ``<urlset><url><loc>…</loc></url></urlset>`` shape is read.
Element names are matched on their local name, so both namespaced
(``http://www.sitemaps.org/schemas/sitemap/0.9``) and bare sitemaps work.
"""

import re
from collections.abc import Iterable

import requests
from lxml import etree
from urllib3.exceptions import LocationValueError

from link_checker.errors import SitemapError
from link_checker.utils.log import log
from link_checker.utils.url import should_exclude

_XML_PARSER = etree.XMLParser(resolve_entities=False, no_network=True)


def _local_name(el: etree._Element) -> str:
    return etree.QName(el).localname


def parse_sitemap(body: bytes) -> list[str]:
    """Return the ``<loc>`` texts of *body* in document order.

    Raises :class:`SitemapError` for malformed XML or a root element other
    than ``urlset``.
    """
    try:
        root = etree.fromstring(body, parser=_XML_PARSER)
    except etree.XMLSyntaxError as exc:
        raise SitemapError(f"parsing sitemap XML: {exc}") from exc

    if _local_name(root) != "urlset":
        raise SitemapError(
            f"parsing sitemap XML: expected <urlset>, got <{_local_name(root)}>"
        )

    locs: list[str] = []
    for url_el in root:
        if not isinstance(url_el.tag, str) or _local_name(url_el) != "url":
            continue
        for child in url_el:
            if isinstance(child.tag, str) and _local_name(child) == "loc":
                locs.append(child.text or "")
                break
    return locs


def get_urls_from_sitemap(
    session: requests.Session,
    sitemap_url: str,
    timeout: float,
    exclude_patterns: Iterable[re.Pattern] = (),
) -> list[str]:
    """
    Fetch *sitemap_url* and return its URLs minus those matching any of
    *exclude_patterns*.  ``<loc>`` values are returned verbatim.
    """
    patterns = tuple(exclude_patterns)
    try:
        resp = session.get(sitemap_url, timeout=timeout)
    except (requests.RequestException, LocationValueError) as exc:
        raise SitemapError(f"fetching sitemap: {exc}") from exc

    if resp.status_code != 200:
        raise SitemapError(f"sitemap returned status {resp.status_code}")

    locs = parse_sitemap(resp.content)
    urls = [loc for loc in locs if not should_exclude(loc, patterns)]
    log.info("[SITEMAP] %d URL(s) in %s (%d excluded)",
             len(urls), sitemap_url, len(locs) - len(urls))
    return urls
