from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .models import MAX_CHAPTERS, Chapter, load_document


@dataclass(frozen=True)
class DocumentInspection:
    path: Path
    chapters_total: int
    verses_total: int
    chapter_order_violations: list[int]
    verse_order_violations: list[int]
    declared_count_mismatches: dict[int, tuple[int, int]]
    verses_missing_original_text: int
    verses_missing_commentary: int

    @property
    def over_cap(self) -> bool:
        return self.chapters_total > MAX_CHAPTERS

    @property
    def ok(self) -> bool:
        return (
            not self.over_cap
            and not self.chapter_order_violations
            and not self.verse_order_violations
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": str(self.path),
            "chapters_total": self.chapters_total,
            "verses_total": self.verses_total,
            "over_cap": self.over_cap,
            "chapter_order_violations": list(self.chapter_order_violations),
            "verse_order_violations": list(self.verse_order_violations),
            "declared_count_mismatches": {
                str(k): {"declared": d, "found": f}
                for k, (d, f) in self.declared_count_mismatches.items()
            },
            "verses_missing_original_text": self.verses_missing_original_text,
            "verses_missing_commentary": self.verses_missing_commentary,
            "ok": self.ok,
        }


def inspect_chapters(chapters: list[Chapter], *, path: Path) -> DocumentInspection:
    chapter_order_violations: list[int] = []
    verse_order_violations: list[int] = []
    mismatches: dict[int, tuple[int, int]] = {}
    missing_original = 0
    missing_commentary = 0
    verses_total = 0

    prev = 0
    for chapter in chapters:
        # Omitted chapters leave gaps; only the direction is checked.
        if chapter.number <= prev:
            chapter_order_violations.append(chapter.number)
        prev = chapter.number

        numbers = [v.number for v in chapter.verses]
        if numbers != list(range(1, len(numbers) + 1)):
            verse_order_violations.append(chapter.number)

        found = len(chapter.verses)
        if chapter.number_of_verses != found:
            mismatches[chapter.number] = (chapter.number_of_verses, found)

        verses_total += found
        missing_original += sum(1 for v in chapter.verses if not v.original_text)
        missing_commentary += sum(1 for v in chapter.verses if not v.commentary)

    return DocumentInspection(
        path=path,
        chapters_total=len(chapters),
        verses_total=verses_total,
        chapter_order_violations=chapter_order_violations,
        verse_order_violations=verse_order_violations,
        declared_count_mismatches=mismatches,
        verses_missing_original_text=missing_original,
        verses_missing_commentary=missing_commentary,
    )


def inspect_document(path: Path) -> DocumentInspection:
    path = path.resolve()
    if not path.exists():
        raise FileNotFoundError(f"Missing document: {path}")
    return inspect_chapters(load_document(path), path=path)
