from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from .models import Chapter

DEFAULT_OUTPUT_NAME = "tafsir.json"


def serialize_document(chapters: Iterable[Chapter]) -> str:
    payload = [c.to_dict() for c in chapters]
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def write_document(
    chapters: Iterable[Chapter],
    out_path: Path,
    *,
    echo: bool = True,
) -> Path:
    """Serialize the whole document once and write it as UTF-8.

    With `echo`, the same serialization is printed to stdout first.
    """

    text = serialize_document(chapters)
    if echo:
        print("JSON data:")
        print(text, end="")

    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text, encoding="utf-8", newline="\n")
    print(f"File path: {out_path.resolve()}")
    return out_path
