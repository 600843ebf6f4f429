"""Exception hierarchy for the link checker."""


class LinkCheckerError(Exception):
    """Base class for every error raised by this package."""


class SitemapError(LinkCheckerError):
    """The sitemap could not be fetched or parsed."""


class CrawlError(LinkCheckerError):
    """The crawl could not start (e.g. the seed URL does not parse)."""


class LinkExtractionError(LinkCheckerError):
    """A single page could not be fetched or parsed for links."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class RateLimitExceeded(LinkCheckerError):
    """A rate-limiter acquisition would have waited longer than allowed."""
