import argparse
import asyncio
import logging
import sys
from typing import Dict, List, Optional, Sequence, TextIO

from colorama import just_fix_windows_console

from . import __version__
from .config import LOG_LEVEL
from .fetcher import Fetcher, FetchError
from .headers_checker import check_headers
from .presenter import display_missing, display_results
from .reporter import write_results_csv
from .sources import collect_urls

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_FATAL = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="headerscan",
        description="Check URLs for missing security response headers.",
    )
    parser.add_argument("urls", nargs="*", metavar="URL", help="URLs to check")
    parser.add_argument("--missing", action="store_true", help="Display only missing headers with URLs")
    parser.add_argument("--skip-ssl", action="store_true", help="Skip SSL verification")
    parser.add_argument("--output", default="", metavar="FILE.csv", help="Export results to a CSV file")
    parser.add_argument("--input", default="", metavar="FILE", help="File containing a list of URLs")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-vv for debug)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _setup_logging(verbose: int):
    level = {0: LOG_LEVEL, 1: "INFO"}.get(verbose, "DEBUG")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


async def scan(
    urls: Sequence[str],
    missing_only: bool = False,
    skip_ssl: bool = False,
    out: Optional[TextIO] = None,
) -> Dict[str, Dict[str, bool]]:
    results: Dict[str, Dict[str, bool]] = {}
    async with Fetcher(skip_ssl=skip_ssl) as fetcher:
        for url in urls:
            try:
                headers = await fetcher.get_headers(url)
            except FetchError as e:
                logger.warning("Error fetching headers for %s: %s", url, e.reason)
                continue
            flags = check_headers(headers)
            results[url] = flags
            if missing_only:
                display_missing(url, flags, out)
            else:
                display_results(url, flags, out)
    return results


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)
    just_fix_windows_console()

    try:
        urls = collect_urls(args.urls, args.input)
    except OSError as e:
        logger.critical("Error reading URLs from file: %s", e)
        return EXIT_FATAL

    if not urls:
        parser.print_usage(sys.stdout)
        return EXIT_USAGE

    results = asyncio.run(scan(urls, missing_only=args.missing, skip_ssl=args.skip_ssl))

    if args.output:
        try:
            write_results_csv(args.output, results)
        except OSError as e:
            logger.critical("Error writing to CSV: %s", e)
            return EXIT_FATAL
        print(f"\nResults exported to {args.output}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
