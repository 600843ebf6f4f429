"""Core crawler, link checker and rate limiter."""

from link_checker.core.checker import Checker, LinkResult
from link_checker.core.crawler import Crawler

__all__ = ["Checker", "Crawler", "LinkResult"]
