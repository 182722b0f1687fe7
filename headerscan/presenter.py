import sys
from typing import Dict, Optional, TextIO
from colorama import Fore, Style
from .headers_checker import REQUIRED_HEADERS, missing_headers


def _status(present: bool, color: bool) -> str:
    text = "Present" if present else "Missing"
    if not color:
        return text
    return (Fore.GREEN if present else Fore.RED) + text + Style.RESET_ALL


def display_results(url: str, results: Dict[str, bool], out: Optional[TextIO] = None):
    out = out or sys.stdout
    # no escape codes when piped or redirected
    color = out.isatty()
    print(f"\nResults for {url}:", file=out)
    for header in REQUIRED_HEADERS:
        print(f"  {header}: {_status(bool(results.get(header)), color)}", file=out)


def display_missing(url: str, results: Dict[str, bool], out: Optional[TextIO] = None):
    """Print one line naming the missing headers; fully covered URLs print nothing."""
    missing = missing_headers(results)
    if missing:
        print(f"{url} is missing: {', '.join(missing)}", file=out or sys.stdout)
