from __future__ import annotations

from urllib.parse import ParseResult, urljoin, urlparse, urlunparse

DEFAULT_INDEX_URL = "https://tefsir.ba/sure"


def normalize_url(raw_url: str) -> str:
    """Normalize a URL before fetching.

    - Lowercases scheme + hostname.
    - Strips fragments.
    """

    parsed: ParseResult = urlparse(raw_url.strip())
    parsed = parsed._replace(
        scheme=(parsed.scheme or "").lower(),
        netloc=(parsed.netloc or "").lower(),
        fragment="",
    )
    return urlunparse(parsed)


def resolve_href(href: str, base_url: str) -> str:
    href = href.strip()
    if not href:
        return ""
    try:
        return normalize_url(urljoin(base_url, href))
    except ValueError:
        # Unparseable (e.g. a broken IPv6 host); treated as no link.
        return ""


def is_absolute_http_url(url: str) -> bool:
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in {"http", "https"} and bool(parsed.hostname)
