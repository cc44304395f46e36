from __future__ import annotations

import json

import pytest

from tafsir_scraper.document_inspect import inspect_chapters, inspect_document
from tafsir_scraper.models import Chapter, Verse


def _verses(*numbers: int) -> tuple[Verse, ...]:
    return tuple(Verse(number=n, text=f"Ajet {n}") for n in numbers)


def test_clean_document(tmp_path) -> None:
    chapters = [
        Chapter(number=1, name="A", number_of_verses=2, verses=_verses(1, 2)),
        Chapter(number=3, name="C", number_of_verses=1, verses=_verses(1)),
    ]
    result = inspect_chapters(chapters, path=tmp_path / "tafsir.json")
    assert result.ok
    assert result.verses_total == 3
    assert result.declared_count_mismatches == {}
    assert result.verses_missing_commentary == 3


def test_reports_violations_and_mismatches(tmp_path) -> None:
    chapters = [
        Chapter(number=2, name="B", number_of_verses=5, verses=_verses(1, 3)),
        Chapter(number=2, name="B2", number_of_verses=0, verses=()),
    ]
    result = inspect_chapters(chapters, path=tmp_path / "tafsir.json")
    assert not result.ok
    assert result.chapter_order_violations == [2]
    assert result.verse_order_violations == [2]
    assert result.declared_count_mismatches == {2: (5, 2)}


def test_over_cap(tmp_path) -> None:
    chapters = [Chapter(number=n, name=str(n)) for n in range(1, 116)]
    result = inspect_chapters(chapters, path=tmp_path / "tafsir.json")
    assert result.over_cap
    assert not result.ok


def test_inspect_document_from_file(tmp_path) -> None:
    path = tmp_path / "tafsir.json"
    path.write_text(
        json.dumps(
            [
                {
                    "number": 1,
                    "name": "El-Fatiha",
                    "placeOfRevelation": "Mekka",
                    "numberOfVerses": 7,
                    "verses": [
                        {"number": 1, "text": "x", "originalText": "y", "commentary": ""}
                    ],
                }
            ]
        ),
        encoding="utf-8",
    )
    result = inspect_document(path)
    assert result.chapters_total == 1
    assert result.declared_count_mismatches == {1: (7, 1)}
    assert result.to_dict()["declared_count_mismatches"] == {
        "1": {"declared": 7, "found": 1}
    }


def test_inspect_document_missing_or_invalid(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        inspect_document(tmp_path / "nope.json")

    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        inspect_document(bad)
