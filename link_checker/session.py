"""HTTP session creation for the link checker."""

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from link_checker.config import DEFAULT_MAX_CONCURRENT, DEFAULT_USER_AGENT, MAX_RETRIES


def build_session(
    user_agent: str = DEFAULT_USER_AGENT,
    pool_size: int = DEFAULT_MAX_CONCURRENT,
) -> requests.Session:
    """Return a ``requests.Session`` with retry logic, keep-alive and the
    identifying User-Agent pre-configured.

    5xx responses are retried; once retries run out the last response is
    returned rather than raised so its status code can be reported.
    """
    session = requests.Session()
    retry = Retry(
        total=MAX_RETRIES,
        backoff_factor=0.5,
        status_forcelist=[500, 502, 503, 504],
        allowed_methods=frozenset({"HEAD", "GET"}),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(
        max_retries=retry,
        pool_connections=pool_size,
        pool_maxsize=pool_size,
    )
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers.update({
        "User-Agent": user_agent,
        "Accept": (
            "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
        ),
        "Connection": "keep-alive",
    })
    return session
