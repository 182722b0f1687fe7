from typing import Dict, List, Mapping

REQUIRED_HEADERS = (
    'Content-Security-Policy',
    'Strict-Transport-Security',
    'X-Frame-Options',
    'X-Content-Type-Options',
    'Referrer-Policy',
    'Permissions-Policy',
)


def check_headers(headers: Mapping[str, str]) -> Dict[str, bool]:
    # header names are case-insensitive; values are never looked at
    seen = {k.lower() for k in headers.keys()}
    return {h: h.lower() in seen for h in REQUIRED_HEADERS}


def missing_headers(results: Mapping[str, bool]) -> List[str]:
    return [h for h in REQUIRED_HEADERS if not results.get(h)]
