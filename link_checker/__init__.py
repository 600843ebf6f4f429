"""
link_checker
============
Find broken links on a website.  URLs come from an XML sitemap or from a
recursive same-origin crawl, and each one is checked with a ``HEAD``
request under a concurrency ceiling and a shared rate limit.

Package structure
-----------------
link_checker/
├── __init__.py       – package init and public API
├── __main__.py       – ``python -m link_checker``
├── cli.py            – argparse CLI with ``INPUT_*`` env fallbacks
├── config.py         – constants and the ``Config`` dataclass
├── errors.py         – exception hierarchy
├── report.py         – result summary and GitHub Actions outputs
├── session.py        – requests.Session factory
├── core/
│   ├── crawler.py    – depth-first same-origin ``Crawler``
│   ├── checker.py    – ``Checker`` and ``LinkResult``
│   └── ratelimit.py  – thread-safe ``TokenBucket``
├── extraction/
│   ├── html_parser.py – BeautifulSoup helpers (``<base>``, ``<a>``)
│   ├── links.py       – ``extract_links_from_page``
│   └── sitemap.py     – ``get_urls_from_sitemap``
├── resolve/
│   ├── mime.py       – Content-Type → file/directory classifier
│   └── base.py       – effective base URL for pages without ``<base>``
└── utils/
    ├── log.py        – colour / CI-aware logging
    └── url.py        – URL resolution and path helpers

Quick start
-----------
    from link_checker import Checker, Config

    checker = Checker(Config(base_url="https://example.com", max_depth=2))
    urls = checker.crawl_website("https://example.com", 2)
    broken = [r for r in checker.check_links(urls) if r.is_broken]
"""

__version__ = "1.0.0"

from link_checker.config import Config
from link_checker.core import Checker, Crawler, LinkResult
from link_checker.extraction import extract_links_from_page, get_urls_from_sitemap
from link_checker.resolve import PathKind, classify, resolve_base
from link_checker.utils.url import resolve_url

__all__ = [
    "__version__",
    "Checker",
    "Config",
    "Crawler",
    "LinkResult",
    "PathKind",
    "classify",
    "extract_links_from_page",
    "get_urls_from_sitemap",
    "resolve_base",
    "resolve_url",
]
