"""
Broken-link checking.

``Checker`` ties the pieces together: it loads URLs from a sitemap or a
crawl and then checks each one with a ``HEAD`` request (falling back to
``GET``), fanning out over a thread pool gated by ``max_concurrent`` and a
shared token-bucket limiter.  A failure on one URL never aborts the batch;
it becomes a :class:`LinkResult` with status 0.
"""

from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass

import requests
from tqdm import tqdm
from urllib3.exceptions import LocationValueError

from link_checker.config import Config
from link_checker.core.crawler import Crawler
from link_checker.core.ratelimit import TokenBucket
from link_checker.errors import RateLimitExceeded
from link_checker.extraction.sitemap import get_urls_from_sitemap
from link_checker.session import build_session
from link_checker.utils.log import log
from link_checker.utils.url import should_exclude

_MALFORMED_URL_ERRORS = (
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidURL,
    # urllib3 rejects hosts like "a..b" before requests can wrap the error
    LocationValueError,
)


def format_duration(seconds: float) -> str:
    """Compact human-readable duration: ``850µs``, ``12.3ms``, ``1.204s``."""
    if seconds < 1e-3:
        return f"{seconds * 1e6:.0f}µs"
    if seconds < 1:
        return f"{seconds * 1e3:.1f}ms"
    return f"{seconds:.3f}s"


def status_emoji(status_code: int) -> str:
    if 200 <= status_code < 300:
        return "✅"
    if 300 <= status_code < 400:
        return "🔄"
    if 400 <= status_code < 500:
        return "❌"
    if status_code >= 500:
        return "💥"
    return "❓"


@dataclass
class LinkResult:
    """Outcome of checking one URL."""

    url: str
    status_code: int = 0
    error: str | None = None
    duration: str = ""

    @property
    def is_broken(self) -> bool:
        return self.status_code == 0 or self.status_code >= 400

    def to_dict(self) -> dict:
        data: dict = {"url": self.url, "status_code": self.status_code}
        if self.error:
            data["error"] = self.error
        data["duration"] = self.duration
        return data


class Checker:
    """Loads URLs (sitemap or crawl) and checks them for broken links."""

    def __init__(
        self,
        config: Config,
        session: requests.Session | None = None,
        limiter: TokenBucket | None = None,
    ) -> None:
        self.config = config
        self.session = session or build_session(
            user_agent=config.user_agent,
            pool_size=max(1, config.max_concurrent),
        )
        rate = max(1, config.max_concurrent)
        self.limiter = limiter or TokenBucket(rate, rate)

    # ------------------------------------------------------------------
    # URL discovery
    # ------------------------------------------------------------------

    def get_urls_from_sitemap(self, sitemap_url: str) -> list[str]:
        return get_urls_from_sitemap(
            self.session, sitemap_url, self.config.timeout,
            self.config.exclude_patterns,
        )

    def crawl_website(self, seed_url: str, max_depth: int) -> list[str]:
        crawler = Crawler(
            self.session,
            timeout=self.config.timeout,
            exclude_patterns=self.config.exclude_patterns,
        )
        return crawler.crawl(seed_url, max_depth)

    def should_exclude(self, url: str) -> bool:
        return should_exclude(url, self.config.exclude_patterns)

    # ------------------------------------------------------------------
    # Checking
    # ------------------------------------------------------------------

    def check_links(self, urls: list[str]) -> list[LinkResult]:
        """
        Check every URL in *urls* concurrently.

        The returned list is index-aligned with *urls* regardless of the
        order in which checks complete.
        """
        if not urls:
            return []

        total = len(urls)
        results: list[LinkResult | None] = [None] * total
        workers = max(1, self.config.max_concurrent)

        with ThreadPoolExecutor(max_workers=workers) as pool, tqdm(
            total=total,
            desc="Checking",
            unit="URL",
            dynamic_ncols=True,
            disable=self.config.verbose,
        ) as bar:
            futures = {
                pool.submit(self._check_with_limit, url): index
                for index, url in enumerate(urls)
            }
            for checked, future in enumerate(as_completed(futures), start=1):
                result = future.result()
                results[futures[future]] = result
                bar.update(1)
                if self.config.verbose:
                    log.info(
                        "%s [%d/%d] %s (Status: %d, Duration: %s)",
                        status_emoji(result.status_code), checked, total,
                        result.url, result.status_code, result.duration,
                    )

        return [r for r in results if r is not None]

    def _check_with_limit(self, url: str) -> LinkResult:
        start = time.monotonic()
        try:
            self.limiter.acquire(max_wait=self.config.timeout)
        except RateLimitExceeded as exc:
            return LinkResult(
                url=url,
                error=f"rate limiter: {exc}",
                duration=format_duration(time.monotonic() - start),
            )
        return self.check_single_link(url)

    def _head_or_get(self, url: str, timeout: float) -> requests.Response:
        try:
            return self.session.head(url, timeout=timeout, allow_redirects=True)
        except _MALFORMED_URL_ERRORS:
            raise
        except requests.RequestException as exc:
            log.debug("[ERR] HEAD %s failed (%s) – retrying with GET", url, exc)
            return self.session.get(url, timeout=timeout, stream=True)

    def check_single_link(self, url: str) -> LinkResult:
        """``HEAD`` *url*, retrying with ``GET`` if the ``HEAD`` fails."""
        start = time.monotonic()
        try:
            resp = self._head_or_get(url, self.config.timeout)
        except _MALFORMED_URL_ERRORS as exc:
            return LinkResult(
                url=url,
                error=f"creating request: {exc}",
                duration=format_duration(time.monotonic() - start),
            )
        except requests.RequestException as exc:
            return LinkResult(
                url=url,
                error=f"request failed: {exc}",
                duration=format_duration(time.monotonic() - start),
            )

        try:
            result = LinkResult(
                url=url,
                status_code=resp.status_code,
                duration=format_duration(time.monotonic() - start),
            )
            if resp.status_code >= 400:
                result.error = f"HTTP {resp.status_code} {resp.reason or ''}".rstrip()
            return result
        finally:
            resp.close()
