"""Canned tefsir.ba pages and an in-memory session for the test suite."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

import requests

INDEX_URL = "https://tefsir.ba/sure"


@dataclass
class FakeResponse:
    url: str
    content: bytes
    status_code: int = 200
    headers: dict[str, str] = field(
        default_factory=lambda: {"Content-Type": "text/html; charset=utf-8"}
    )


class FakeSession:
    """Serves canned HTML by URL.

    A route value may be a string (always served), an exception instance
    (always raised), an int (HTTP status), or a list of those consumed one per
    request, the last entry repeating.
    """

    def __init__(self, routes: dict[str, object]) -> None:
        self.routes = routes
        self.calls: Counter[str] = Counter()

    def get(self, url: str, *, timeout=None, headers=None) -> FakeResponse:
        self.calls[url] += 1
        if url not in self.routes:
            raise requests.ConnectionError(f"no route to {url}")

        outcome = self.routes[url]
        if isinstance(outcome, list):
            idx = min(self.calls[url], len(outcome)) - 1
            outcome = outcome[idx]

        if isinstance(outcome, Exception):
            raise outcome
        if isinstance(outcome, int):
            return FakeResponse(url=url, content=b"", status_code=outcome)
        return FakeResponse(url=url, content=str(outcome).encode("utf-8"))

    def close(self) -> None:
        pass


def page(body: str, *, title: str = "tefsir.ba") -> str:
    return f"<html><head><title>{title}</title></head><body>{body}</body></html>"


def index_page(chapters: list[tuple[str, str]]) -> str:
    links = "".join(f'<li><a href="{href}">{text}</a></li>' for text, href in chapters)
    return page(f'<nav><a href="/">Početna</a></nav><article><ul>{links}</ul></article>')


def chapter_page(
    *,
    subtitle: str = "Objavljena u Mekki",
    meta: str = "Broj ajeta: ima 7 ajeta",
    verses: list[tuple[str, str]] = (),
    extra: str = "",
) -> str:
    links = "".join(f'<a href="{href}">{text}</a>' for text, href in verses)
    return page(
        f'<h3 class="post-subtitle">{subtitle}</h3>'
        f'<article><p class="post-meta">{meta}</p>{links}{extra}</article>'
    )


def verse_page(
    *,
    original: str = "بِسْمِ اللَّهِ الرَّحْمَٰنِ الرَّحِيمِ",
    paragraphs: list[str] = (),
    tail: str = "",
) -> str:
    ps = "".join(f"<p>{p}</p>" for p in paragraphs)
    return page(f'<article><p align="right">{original}</p>{ps}{tail}</article>')
