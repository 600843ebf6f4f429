"""
Logging for the link checker.

Console output goes through ``colorlog`` with the ``[TAG]`` prefixes used
across the package highlighted.  Under GitHub Actions the console switches
to plain text and warnings/errors become workflow annotations.
"""

import logging
import os
import re
from collections.abc import Iterator
from contextlib import contextmanager

import colorlog

log = logging.getLogger("link-checker")

_CONSOLE_FMT = "%(log_color)s%(asctime)s %(levelname)-7s%(reset)s %(message)s"
_PLAIN_FMT = "%(asctime)s %(levelname)-7s %(message)s"
_FILE_FMT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

_LEVEL_COLOURS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}

_RESET = "\033[0m"
_TAG_COLOURS = {
    "CRAWL": "\033[37m",
    "SKIP": "\033[90m",
    "PROBE": "\033[90m",
    "BASE": "\033[36m",
    "SITEMAP": "\033[34m",
    "OK": "\033[1;32m",
    "REDIRECT": "\033[33m",
    "BROKEN": "\033[1;31m",
    "ERR": "\033[1;31m",
}
_TAG_RE = re.compile(r"\[(%s)\]" % "|".join(_TAG_COLOURS))


def in_ci() -> bool:
    return os.environ.get("GITHUB_ACTIONS") == "true"


def highlight_tags(message: str) -> str:
    """Wrap every known ``[TAG]`` in *message* in its ANSI colour."""
    return _TAG_RE.sub(
        lambda m: f"{_TAG_COLOURS[m.group(1)]}{m.group(0)}{_RESET}", message
    )


@contextmanager
def ci_section(title: str) -> Iterator[None]:
    """Fold the log lines emitted inside the block into a collapsible
    group in the Actions log.  Outside CI this does nothing."""
    grouped = in_ci()
    if grouped:
        print(f"::group::{title}", flush=True)
    try:
        yield
    finally:
        if grouped:
            print("::endgroup::", flush=True)


class _TagFormatter(colorlog.ColoredFormatter):
    def format(self, record: logging.LogRecord) -> str:
        return highlight_tags(super().format(record))


class _AnnotationFormatter(logging.Formatter):
    """Prefix warnings and errors with ``::warning::`` / ``::error::``."""

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        if record.levelno >= logging.ERROR:
            return "::error::" + text
        if record.levelno >= logging.WARNING:
            return "::warning::" + text
        return text


def _console_handler() -> logging.Handler:
    if in_ci():
        handler = logging.StreamHandler()
        handler.setFormatter(_AnnotationFormatter(_PLAIN_FMT, datefmt="%H:%M:%S"))
        return handler
    handler = colorlog.StreamHandler()
    handler.setFormatter(_TagFormatter(
        _CONSOLE_FMT, datefmt="%H:%M:%S", log_colors=_LEVEL_COLOURS,
    ))
    return handler


def setup_logging(debug: bool = False, log_file: str | None = None) -> None:
    """(Re)configure the ``link-checker`` logger.

    *log_file*, when given, receives every record down to DEBUG regardless
    of *debug*.
    """
    log.handlers.clear()
    log.setLevel(logging.DEBUG if debug or log_file else logging.INFO)

    console = _console_handler()
    console.setLevel(logging.DEBUG if debug else logging.INFO)
    log.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(_FILE_FMT))
        log.addHandler(file_handler)
        log.debug("Writing debug log to %s", log_file)
