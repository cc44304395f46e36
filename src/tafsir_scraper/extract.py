"""Field extraction rules for tefsir.ba markup.

Every rule is a pure function over an already parsed document. Absent markup
yields the field's zero value ("" or 0) instead of raising; the only error
raised here is `MissingContainerError`, for callers that need the container.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

from .models import MAX_CHAPTERS
from .urls import resolve_href

CONTAINER_SELECTOR = "article"
PLACE_SELECTOR = "h3.post-subtitle"
VERSE_COUNT_SELECTOR = "p.post-meta"
ORIGINAL_TEXT_SELECTOR = "article p[align='right']"
COMMENTARY_SELECTOR = "p, h2"

# "Broj ajeta: ima 7 ajeta" -> 7
VERSE_COUNT_MARKER = "ima"
# Normalizes the locative ending of the last subtitle word ("Mekki" -> "Mekka").
PLACE_SUFFIX = "a"
STOP_CLASS = "tag"
BOILERPLATE_PARAGRAPHS = 4

_ORDINAL_PREFIX = re.compile(r"^\d+[^\w]\s+")


class MissingContainerError(ValueError):
    """The page has no content container to extract from."""


@dataclass(frozen=True)
class Link:
    text: str
    href: str


def parse_html(markup: str) -> BeautifulSoup:
    return BeautifulSoup(markup, "html.parser")


def _attr_text(val: object) -> str:
    if isinstance(val, list):
        return " ".join(str(v) for v in val)
    return str(val or "")


def content_container(soup: BeautifulSoup) -> Tag | None:
    return soup.select_one(CONTAINER_SELECTOR)


def require_container(soup: BeautifulSoup, *, url: str) -> Tag:
    container = content_container(soup)
    if container is None:
        raise MissingContainerError(f"No <{CONTAINER_SELECTOR}> container in {url}")
    return container


def clean_title(text: str) -> str:
    """Strip a leading ordinal such as "12. " from a link label.

    Text without such a prefix is returned unchanged.
    """

    return _ORDINAL_PREFIX.sub("", text, count=1)


def _link(a: Tag, base_url: str) -> Link:
    return Link(
        text=a.get_text().strip(),
        href=resolve_href(_attr_text(a.get("href")), base_url),
    )


def discover_chapter_links(
    soup: BeautifulSoup,
    *,
    base_url: str,
    limit: int = MAX_CHAPTERS,
) -> list[Link]:
    container = content_container(soup)
    if container is None:
        return []
    anchors = container.select("a")[: max(0, min(limit, MAX_CHAPTERS))]
    return [_link(a, base_url) for a in anchors]


def discover_verse_links(container: Tag, *, base_url: str) -> list[Link]:
    out: list[Link] = []
    for a in container.select("a"):
        if _attr_text(a.get("target")) == "_blank":
            continue
        out.append(_link(a, base_url))
    return out


def extract_place_of_revelation(soup: BeautifulSoup) -> str:
    subtitle = soup.select_one(PLACE_SELECTOR)
    if subtitle is None:
        return ""
    parts = subtitle.get_text().split()
    if not parts:
        return ""
    return parts[-1][:-1] + PLACE_SUFFIX


def extract_verse_count(container: Tag) -> int:
    meta = container.select_one(VERSE_COUNT_SELECTOR)
    if meta is None:
        return 0
    components = meta.get_text().split(" ")
    try:
        idx = components.index(VERSE_COUNT_MARKER)
        return int(components[idx + 1])
    except (ValueError, IndexError):
        return 0


def extract_original_text(soup: BeautifulSoup) -> str:
    paragraph = soup.select_one(ORIGINAL_TEXT_SELECTOR)
    if paragraph is None:
        return ""
    return paragraph.get_text().strip()


def extract_commentary(soup: BeautifulSoup) -> str:
    container = content_container(soup)
    if container is None:
        return ""

    parts: list[str] = []
    paragraphs_seen = 0
    for el in container.select(COMMENTARY_SELECTOR):
        classes = el.get("class") or []
        if STOP_CLASS in classes:
            break

        if el.name == "p":
            paragraphs_seen += 1
            if paragraphs_seen <= BOILERPLATE_PARAGRAPHS:
                continue

        text = el.get_text().strip()
        if text:
            parts.append(text + "\n")

    return "".join(parts)
