"""
Command-line interface for the link checker.

Every option can also be given as a GitHub Action input through its
``INPUT_*`` environment variable; an explicit flag always wins.
"""

import argparse
import logging
import sys
import time

from link_checker import __version__
from link_checker.config import (
    DEFAULT_MAX_CONCURRENT, DEFAULT_MAX_DEPTH, DEFAULT_USER_AGENT,
    REQUEST_TIMEOUT, Config, compile_exclude_patterns,
)
from link_checker.core.checker import Checker
from link_checker.errors import CrawlError, SitemapError
from link_checker.report import log_report, write_github_outputs
from link_checker.utils.log import log, setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="link-checker",
        description="Check a website for broken links, using its sitemap "
                    "or by crawling it from a base URL.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Environment variables (GitHub Action inputs):\n"
            "  INPUT_SITEMAP_URL, INPUT_BASE_URL, INPUT_MAX_DEPTH, INPUT_TIMEOUT,\n"
            "  INPUT_USER_AGENT, INPUT_EXCLUDE_PATTERNS, INPUT_FAIL_ON_ERROR,\n"
            "  INPUT_MAX_CONCURRENT, INPUT_VERBOSE\n"
            "Command line flags take precedence over environment variables.\n\n"
            "Examples:\n"
            "  link-checker --sitemap-url https://example.com/sitemap.xml\n"
            "  link-checker --base-url https://example.com --max-depth 2 --verbose\n"
            "  INPUT_BASE_URL=https://example.com python -m link_checker\n"
        ),
    )
    parser.add_argument(
        "--sitemap-url",
        help="URL of the sitemap to check",
    )
    parser.add_argument(
        "--base-url",
        help="Base URL to start crawling from",
    )
    parser.add_argument(
        "--max-depth", type=int,
        help=f"Maximum crawl depth (default: {DEFAULT_MAX_DEPTH})",
    )
    parser.add_argument(
        "--timeout", type=int,
        help=f"Request timeout in seconds (default: {REQUEST_TIMEOUT})",
    )
    parser.add_argument(
        "--user-agent",
        help=f"User agent string (default: {DEFAULT_USER_AGENT})",
    )
    parser.add_argument(
        "--exclude-patterns",
        help="Comma-separated regex patterns to exclude URLs",
    )
    parser.add_argument(
        "--fail-on-error", action=argparse.BooleanOptionalAction, default=None,
        help="Exit with error code if broken links found (default: true). "
             "A link is broken when it answers with status 400 or above, "
             "or cannot be reached at all (reported as status 0)",
    )
    parser.add_argument(
        "--max-concurrent", type=int,
        help=f"Maximum concurrent requests (default: {DEFAULT_MAX_CONCURRENT})",
    )
    parser.add_argument(
        "--verbose", action="store_true", default=None,
        help="Log every checked link",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )
    parser.add_argument(
        "--log-file",
        help="Write detailed logs to this file (always at DEBUG level)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s version {__version__}",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    """Environment-backed ``Config`` with explicit flags layered on top."""
    cfg = Config.from_environment()
    if args.sitemap_url is not None:
        cfg.sitemap_url = args.sitemap_url
    if args.base_url is not None:
        cfg.base_url = args.base_url
    if args.max_depth is not None:
        cfg.max_depth = args.max_depth
    if args.timeout is not None:
        cfg.timeout = args.timeout
    if args.user_agent is not None:
        cfg.user_agent = args.user_agent
    if args.exclude_patterns is not None:
        cfg.exclude_patterns = compile_exclude_patterns(args.exclude_patterns)
    if args.fail_on_error is not None:
        cfg.fail_on_error = args.fail_on_error
    if args.max_concurrent is not None:
        cfg.max_concurrent = args.max_concurrent
    if args.verbose is not None:
        cfg.verbose = args.verbose
    return cfg


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    setup_logging(debug=args.debug, log_file=args.log_file)

    if args.debug:
        logging.getLogger("urllib3").setLevel(logging.DEBUG)

    cfg = build_config(args)

    if not cfg.sitemap_url and not cfg.base_url:
        log.error("Either --sitemap-url or --base-url must be provided "
                  "(use --help for usage information)")
        sys.exit(1)

    checker = Checker(cfg)
    t0 = time.monotonic()

    try:
        if cfg.sitemap_url:
            log.info("Fetching URLs from sitemap: %s", cfg.sitemap_url)
            urls = checker.get_urls_from_sitemap(cfg.sitemap_url)
        else:
            log.info("Crawling website starting from: %s", cfg.base_url)
            urls = checker.crawl_website(cfg.base_url, cfg.max_depth)
    except SitemapError as exc:
        log.error("Failed to fetch sitemap: %s", exc)
        sys.exit(1)
    except CrawlError as exc:
        log.error("Failed to crawl website: %s", exc)
        sys.exit(1)

    log.info("Found %d URLs to check", len(urls))

    results = checker.check_links(urls)
    broken = log_report(results)
    write_github_outputs(results)
    log.info("Total elapsed time: %.1f s", time.monotonic() - t0)

    if broken and cfg.fail_on_error:
        sys.exit(1)


if __name__ == "__main__":
    main()
