"""
HTML parsing helpers built on BeautifulSoup with the ``lxml`` tree builder.

``lxml`` recovers from unclosed and misnested tags, so links that a
browser would reach are still found in broken markup.
"""

from collections.abc import Iterator

from bs4 import BeautifulSoup

_BS4_PARSER = "lxml"


def parse_html(markup: bytes | str) -> BeautifulSoup:
    """Parse *markup* into a tree.  Raises ``bs4.ParserRejectedMarkup``
    when the document cannot be parsed at all."""
    return BeautifulSoup(markup, _BS4_PARSER)


def find_base_href(soup: BeautifulSoup) -> str | None:
    """``href`` of the first ``<base href=…>`` element anywhere in *soup*."""
    el = soup.find("base", href=True)
    if el is None:
        return None
    return el["href"]


def iter_anchor_hrefs(soup: BeautifulSoup) -> Iterator[str]:
    """Yield the ``href`` of every ``<a>`` in document order.

    Anchors without an ``href`` attribute are skipped.
    """
    for el in soup.find_all("a"):
        href = el.get("href")
        if href is not None:
            yield href
