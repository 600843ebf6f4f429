"""
Base-URL resolution for pages without a ``<base>`` tag.

Public API
----------
    from link_checker.resolve import resolve_base, classify, PathKind
"""

from link_checker.resolve.base import resolve_base
from link_checker.resolve.mime import PathKind, classify, normalise_mime

__all__ = ["resolve_base", "classify", "normalise_mime", "PathKind"]
