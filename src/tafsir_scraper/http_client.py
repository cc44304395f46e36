from __future__ import annotations

from dataclasses import dataclass

import requests
from requests import exceptions as req_exc

from .urls import is_absolute_http_url, normalize_url

DEFAULT_HEADERS = {"User-Agent": "tafsir-scraper/0.1 (+https://tefsir.ba)"}


class InvalidUrlError(ValueError):
    """The URL is not a well-formed absolute http(s) URL; never retried."""


class FetchError(RuntimeError):
    """A network-level failure that may succeed on a later attempt."""


@dataclass(frozen=True)
class FetchResult:
    url: str
    body: bytes

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class HttpClient:
    """Single-attempt GET over a shared session.

    Retrying is the caller's decision (see `RetryPolicy`); one call here is
    one request on the wire.
    """

    def __init__(
        self,
        session: requests.Session,
        *,
        timeout_s: int = 45,
    ) -> None:
        self._session = session
        self._timeout_s = timeout_s

    def get(self, url: str) -> FetchResult:
        if not is_absolute_http_url(url):
            raise InvalidUrlError(f"Invalid URL: {url!r}")
        normalized = normalize_url(url)

        try:
            resp = self._session.get(
                normalized,
                timeout=self._timeout_s,
                headers=DEFAULT_HEADERS,
            )
        except req_exc.RequestException as e:
            raise FetchError(f"Failed to fetch {normalized}: {e}") from e

        if resp.status_code >= 400:
            raise FetchError(f"Failed to fetch {normalized}: HTTP {resp.status_code}")

        return FetchResult(url=normalized, body=resp.content)
