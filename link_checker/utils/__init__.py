"""Utility helpers for URL resolution and logging."""

from link_checker.utils.url import (
    ensure_trailing_slash,
    host_of,
    parent_directory,
    resolve_url,
    should_exclude,
)
from link_checker.utils.log import setup_logging, log

__all__ = [
    "ensure_trailing_slash",
    "host_of",
    "parent_directory",
    "resolve_url",
    "should_exclude",
    "setup_logging",
    "log",
]
