"""
Sub-package for finding URLs: HTML anchors and XML sitemaps.

Public API
----------
    from link_checker.extraction import extract_links_from_page, get_urls_from_sitemap
"""

from link_checker.extraction.links import extract_links_from_page
from link_checker.extraction.sitemap import get_urls_from_sitemap

__all__ = ["extract_links_from_page", "get_urls_from_sitemap"]
