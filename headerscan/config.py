import os
from pathlib import Path
from dotenv import load_dotenv
load_dotenv(dotenv_path=Path('.') / '.env', verbose=False)

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def parse_log_level(value):
    level = (value or "").strip().upper()
    return level if level in LOG_LEVELS else "WARNING"


def parse_timeout(value):
    try:
        seconds = float(value or 0)
    except ValueError:
        return None
    return seconds if seconds > 0 else None


USER_AGENT = os.getenv("HEADERSCAN_USER_AGENT", "headerscan/1.0")
# 0, unset or unparsable leaves aiohttp's default timeout in place
REQUEST_TIMEOUT = parse_timeout(os.getenv("HEADERSCAN_TIMEOUT"))
LOG_LEVEL = parse_log_level(os.getenv("HEADERSCAN_LOG_LEVEL", "WARNING"))
