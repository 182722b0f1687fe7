import csv
import logging
from typing import Dict
from .headers_checker import REQUIRED_HEADERS

logger = logging.getLogger(__name__)


def write_results_csv(path: str, results: Dict[str, Dict[str, bool]]):
    # parent directories are not created; OSError goes to the caller
    with open(path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f, lineterminator='\n')
        writer.writerow(['URL', *REQUIRED_HEADERS])
        for url, flags in results.items():
            writer.writerow([url, *('Present' if flags.get(h) else 'Missing' for h in REQUIRED_HEADERS)])
    logger.info("wrote %d rows to %s", len(results), path)
