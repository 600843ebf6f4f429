"""
Depth-bounded, same-origin website crawler.

Starts from a seed URL and follows ``<a href>`` links depth-first up to
``max_depth`` hops away.  Every URL is recorded once: a node is marked
visited *before* its children are expanded, so link cycles (A → B → A)
terminate.  A page that cannot be fetched or parsed prunes only its own
branch; the rest of the crawl carries on.

The traversal keeps its own ``(url, depth)`` stack instead of recursing,
so arbitrarily long link chains do not exhaust the interpreter stack.
"""

import re
import urllib.parse
from collections.abc import Iterable

import requests

from link_checker.config import REQUEST_TIMEOUT
from link_checker.errors import CrawlError, LinkExtractionError
from link_checker.extraction.links import extract_links_from_page
from link_checker.utils.log import log
from link_checker.utils.url import should_exclude


class Crawler:
    """
    Single-threaded depth-first crawler.

    State (visited set, pending stack and result list) lives only for the
    duration of one :meth:`crawl` call, so one ``Crawler`` may run several
    crawls in turn.
    """

    def __init__(
        self,
        session: requests.Session,
        timeout: float = REQUEST_TIMEOUT,
        exclude_patterns: Iterable[re.Pattern] = (),
    ) -> None:
        self.session = session
        self.timeout = timeout
        self.exclude_patterns = tuple(exclude_patterns)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def crawl(self, seed_url: str, max_depth: int) -> list[str]:
        """
        Return every URL reachable from *seed_url* within *max_depth* hops,
        seed first, in depth-first discovery order.

        Raises :class:`CrawlError` only when *seed_url* does not parse.
        """
        try:
            urllib.parse.urlsplit(seed_url)
        except ValueError as exc:
            raise CrawlError(f"parsing base URL: {exc}") from exc

        log.info("[CRAWL] Starting at %s (max depth %d)", seed_url, max_depth)
        visited: set[str] = set()
        urls: list[str] = []
        stack: list[tuple[str, int]] = [(seed_url, 0)]

        while stack:
            url, depth = stack.pop()
            if depth > max_depth or url in visited:
                continue
            visited.add(url)
            urls.append(url)
            log.debug("[CRAWL] depth=%d %s", depth, url)

            if depth == max_depth:
                continue
            children = self._children(url, seed_url, visited)
            # reversed so the first link on the page is expanded first
            stack.extend((link, depth + 1) for link in reversed(children))

        log.info("[CRAWL] Done: %d URL(s) discovered", len(urls))
        return urls

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _children(self, url: str, site_base: str, visited: set[str]) -> list[str]:
        """Same-origin links on *url* that are neither visited nor excluded."""
        try:
            links = extract_links_from_page(
                self.session, url, url, site_base, self.timeout
            )
        except LinkExtractionError as exc:
            log.debug("[SKIP] No links from %s – %s", url, exc.reason)
            return []

        children = []
        for link in links:
            if link in visited:
                continue
            if should_exclude(link, self.exclude_patterns):
                log.debug("[SKIP] Excluded %s", link)
                continue
            children.append(link)
        return children
