from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

# The corpus has a fixed, known number of chapters.
MAX_CHAPTERS = 114


@dataclass(frozen=True)
class Verse:
    number: int
    text: str
    original_text: str = ""
    commentary: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "number": self.number,
            "text": self.text,
            "originalText": self.original_text,
            "commentary": self.commentary,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Verse:
        return cls(
            number=int(data.get("number") or 0),
            text=str(data.get("text") or ""),
            original_text=str(data.get("originalText") or ""),
            commentary=str(data.get("commentary") or ""),
        )


@dataclass(frozen=True)
class Chapter:
    number: int
    name: str
    place_of_revelation: str = ""
    number_of_verses: int = 0
    # Discovery order; may legitimately disagree with number_of_verses.
    verses: tuple[Verse, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "number": self.number,
            "name": self.name,
            "placeOfRevelation": self.place_of_revelation,
            "numberOfVerses": self.number_of_verses,
            "verses": [v.to_dict() for v in self.verses],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Chapter:
        verses = data.get("verses") or []
        return cls(
            number=int(data.get("number") or 0),
            name=str(data.get("name") or ""),
            place_of_revelation=str(data.get("placeOfRevelation") or ""),
            number_of_verses=int(data.get("numberOfVerses") or 0),
            verses=tuple(Verse.from_dict(v) for v in verses if isinstance(v, dict)),
        )


def load_document(path: Path) -> list[Chapter]:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}") from e
    if not isinstance(raw, list):
        raise ValueError(f"Expected a JSON array of chapters in {path}")
    return [Chapter.from_dict(c) for c in raw if isinstance(c, dict)]
