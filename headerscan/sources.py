from typing import List, Optional, Sequence


def read_urls_from_file(path: str) -> List[str]:
    # undecodable bytes are replaced rather than rejected
    with open(path, encoding='utf-8', errors='replace') as f:
        return [line.strip() for line in f if line.strip()]


def collect_urls(cli_urls: Sequence[str], input_file: Optional[str] = None) -> List[str]:
    """CLI URLs first, then the non-blank lines of ``input_file`` in file order."""
    urls = list(cli_urls)
    if input_file:
        urls.extend(read_urls_from_file(input_file))
    return urls
