"""
Configuration constants and the run-time ``Config`` for the link checker.

Values are read from GitHub Action style ``INPUT_*`` environment variables
by :meth:`Config.from_environment`; the CLI layers explicit flags on top.
"""

import os
import re
from dataclasses import dataclass, field

from link_checker.utils.log import log

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------
DEFAULT_MAX_DEPTH = 3
DEFAULT_USER_AGENT = "GitHub-Action-Link-Checker/1.0"
DEFAULT_MAX_CONCURRENT = 10
DEFAULT_FAIL_ON_ERROR = True

REQUEST_TIMEOUT = 30           # seconds per HTTP request
MAX_RETRIES = 3                # urllib3 retries on 5xx

ENV_PREFIX = "INPUT_"

# ---------------------------------------------------------------------------
# Base-URL resolution
# ---------------------------------------------------------------------------

# Extensions that mark the last path segment as a file without probing.
RECOGNIZED_EXTENSIONS = frozenset({
    # markup / server pages
    "html", "htm", "xhtml", "shtml", "php", "asp", "aspx", "jsp",
    # style / script
    "css", "js", "mjs",
    # data
    "json", "xml", "txt", "csv", "rss",
    # documents
    "pdf", "doc", "docx", "xls", "xlsx", "ppt", "pptx",
    # archives
    "zip", "gz", "tar", "rar", "7z",
    # images
    "jpg", "jpeg", "png", "gif", "svg", "webp", "ico",
    # media
    "mp3", "mp4", "webm", "wav",
    # fonts
    "woff", "woff2", "ttf", "eot", "otf",
})

# Content types that behave like a page (relative links resolve below them).
DIRECTORY_MIME_TYPES = frozenset({
    "text/html",
    "application/xhtml+xml",
    "text/plain",
    "text/markdown",
    "application/json",
    "application/ld+json",
    "application/xml",
    "text/xml",
    "application/rss+xml",
    "application/atom+xml",
})

# Content types that are assets (relative links resolve beside them).
FILE_MIME_TYPES = frozenset({
    # documents
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/vnd.ms-excel",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "application/vnd.ms-powerpoint",
    "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    "application/rtf",
    # archives
    "application/zip",
    "application/gzip",
    "application/x-gzip",
    "application/x-tar",
    "application/x-bzip2",
    "application/x-7z-compressed",
    "application/x-rar-compressed",
    "application/vnd.rar",
    "application/octet-stream",
    # images
    "image/png",
    "image/jpeg",
    "image/gif",
    "image/svg+xml",
    "image/webp",
    "image/bmp",
    "image/x-icon",
    "image/vnd.microsoft.icon",
    "image/avif",
    # audio / video
    "audio/mpeg",
    "audio/ogg",
    "audio/wav",
    "audio/webm",
    "video/mp4",
    "video/webm",
    "video/ogg",
    "video/quicktime",
    # fonts
    "font/woff",
    "font/woff2",
    "font/ttf",
    "font/otf",
    "application/font-woff",
    "application/vnd.ms-fontobject",
    # style / script
    "text/css",
    "text/javascript",
    "application/javascript",
    "application/x-javascript",
})

# strconv.ParseBool spellings accepted for boolean inputs
_TRUE_VALUES = frozenset({"1", "t", "T", "true", "TRUE", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "false", "FALSE", "False"})


def parse_bool(value: str) -> bool:
    """Parse *value* like Go's ``strconv.ParseBool``; raise ``ValueError``
    for anything else."""
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean: {value!r}")


def compile_exclude_patterns(raw: str) -> tuple[re.Pattern, ...]:
    """
    Compile a comma-separated list of regular expressions.

    Blank entries are ignored; invalid expressions are logged and skipped
    so that one typo does not disable the whole run.
    """
    patterns: list[re.Pattern] = []
    for chunk in raw.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        try:
            patterns.append(re.compile(chunk))
        except re.error as exc:
            log.warning("Ignoring invalid exclude pattern %r – %s", chunk, exc)
    return tuple(patterns)


def env_str(key: str, default: str) -> str:
    value = os.environ.get(ENV_PREFIX + key, "")
    return value if value else default


def env_int(key: str, default: int) -> int:
    value = os.environ.get(ENV_PREFIX + key, "")
    if value:
        try:
            return int(value)
        except ValueError:
            log.warning("Ignoring non-integer %s%s=%r", ENV_PREFIX, key, value)
    return default


def env_bool(key: str, default: bool) -> bool:
    value = os.environ.get(ENV_PREFIX + key, "")
    if value:
        try:
            return parse_bool(value)
        except ValueError:
            log.warning("Ignoring non-boolean %s%s=%r", ENV_PREFIX, key, value)
    return default


@dataclass
class Config:
    """Settings for one link-checking run."""

    sitemap_url: str = ""
    base_url: str = ""
    max_depth: int = DEFAULT_MAX_DEPTH
    timeout: float = REQUEST_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    exclude_patterns: tuple[re.Pattern, ...] = field(default_factory=tuple)
    fail_on_error: bool = DEFAULT_FAIL_ON_ERROR
    max_concurrent: int = DEFAULT_MAX_CONCURRENT
    verbose: bool = False

    @classmethod
    def from_environment(cls) -> "Config":
        """Build a ``Config`` from ``INPUT_*`` environment variables."""
        return cls(
            sitemap_url=env_str("SITEMAP_URL", ""),
            base_url=env_str("BASE_URL", ""),
            max_depth=env_int("MAX_DEPTH", DEFAULT_MAX_DEPTH),
            timeout=env_int("TIMEOUT", REQUEST_TIMEOUT),
            user_agent=env_str("USER_AGENT", DEFAULT_USER_AGENT),
            exclude_patterns=compile_exclude_patterns(
                env_str("EXCLUDE_PATTERNS", "")
            ),
            fail_on_error=env_bool("FAIL_ON_ERROR", DEFAULT_FAIL_ON_ERROR),
            max_concurrent=env_int("MAX_CONCURRENT", DEFAULT_MAX_CONCURRENT),
            verbose=env_bool("VERBOSE", False),
        )
