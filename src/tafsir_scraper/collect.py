from __future__ import annotations

import sys
from dataclasses import dataclass
from functools import partial

from bs4 import BeautifulSoup
from tqdm import tqdm

from .extract import (
    Link,
    MissingContainerError,
    clean_title,
    content_container,
    discover_chapter_links,
    discover_verse_links,
    extract_commentary,
    extract_original_text,
    extract_place_of_revelation,
    extract_verse_count,
    parse_html,
    require_container,
)
from .http_client import FetchError, HttpClient, InvalidUrlError
from .models import MAX_CHAPTERS, Chapter, Verse
from .retry import RetryExhaustedError, RetryPolicy
from .urls import DEFAULT_INDEX_URL, is_absolute_http_url


class IndexUnavailableError(RuntimeError):
    """The chapter index could not be fetched or parsed; nothing to collect."""


def _log(msg: str) -> None:
    tqdm.write(msg, file=sys.stderr)


@dataclass
class ScrapeConfig:
    index_url: str = DEFAULT_INDEX_URL
    max_chapters: int = MAX_CHAPTERS
    attempts: int = 3
    retry_delay_s: float = 1.0
    timeout_s: int = 45
    show_progress: bool = True

    def __post_init__(self) -> None:
        self.max_chapters = max(0, min(int(self.max_chapters), MAX_CHAPTERS))


class VerseCollector:
    def __init__(self, *, http: HttpClient) -> None:
        self.http = http

    def collect(
        self,
        chapter_url: str,
        *,
        page: BeautifulSoup | None = None,
    ) -> list[Verse]:
        """Collect a chapter's verses in link order.

        `page` is the already parsed chapter document when the caller has
        one; otherwise the chapter is fetched here, once. Failures at this
        level are logged and produce an empty list.
        """

        if page is None:
            try:
                page = parse_html(self.http.get(chapter_url).text)
            except (InvalidUrlError, FetchError) as e:
                _log(f"Failed to fetch chapter for verses: {e}")
                return []

        container = content_container(page)
        if container is None:
            _log(f"Verse parent element not found: {chapter_url}")
            return []

        verses: list[Verse] = []
        for link in discover_verse_links(container, base_url=chapter_url):
            # Numbered among collected verses so skipped pages leave no gap.
            verse = self._collect_verse(link, number=len(verses) + 1)
            if verse is not None:
                verses.append(verse)
        return verses

    def _collect_verse(self, link: Link, *, number: int) -> Verse | None:
        try:
            res = self.http.get(link.href)
        except (InvalidUrlError, FetchError) as e:
            _log(f"Failed to fetch HTML content for verse: {link.href} ({e})")
            return None

        doc = parse_html(res.text)
        return Verse(
            number=number,
            text=clean_title(link.text),
            original_text=extract_original_text(doc),
            commentary=extract_commentary(doc),
        )


class ChapterCollector:
    def __init__(
        self,
        *,
        http: HttpClient,
        config: ScrapeConfig,
        verses: VerseCollector | None = None,
        retry: RetryPolicy | None = None,
    ) -> None:
        self.http = http
        self.cfg = config
        self.verses = verses or VerseCollector(http=http)
        self.retry = retry or RetryPolicy(
            attempts=config.attempts, delay_s=config.retry_delay_s
        )

    def _fetch_index(self) -> list[Link]:
        url = self.cfg.index_url
        try:
            res = self.http.get(url)
        except (InvalidUrlError, FetchError) as e:
            raise IndexUnavailableError(str(e)) from e

        soup = parse_html(res.text)
        if content_container(soup) is None:
            raise IndexUnavailableError(f"Chapter parent element not found: {url}")
        return discover_chapter_links(
            soup, base_url=url, limit=self.cfg.max_chapters
        )

    def _collect_chapter(self, link: Link, *, number: int) -> Chapter:
        res = self.http.get(link.href)
        doc = parse_html(res.text)
        container = require_container(doc, url=link.href)

        return Chapter(
            number=number,
            name=clean_title(link.text),
            place_of_revelation=extract_place_of_revelation(doc),
            number_of_verses=extract_verse_count(container),
            verses=tuple(self.verses.collect(link.href, page=doc)),
        )

    def collect(self) -> list[Chapter]:
        links = self._fetch_index()

        chapters: list[Chapter] = []
        progress = tqdm(
            list(enumerate(links, start=1)),
            desc="Chapters",
            unit="chapter",
            disable=not self.cfg.show_progress,
        )
        for number, link in progress:
            if not is_absolute_http_url(link.href):
                _log(f"Failed to extract chapter information: #{number} {link}")
                continue

            try:
                chapter = self.retry.run(
                    partial(self._collect_chapter, link, number=number),
                    label=f"chapter {number}",
                )
            except (RetryExhaustedError, InvalidUrlError, MissingContainerError) as e:
                _log(f"Skipping chapter {number}: {e}")
                continue

            chapters.append(chapter)

        return chapters
