from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import requests

from .collect import ChapterCollector, IndexUnavailableError, ScrapeConfig
from .document_inspect import inspect_document
from .http_client import HttpClient
from .models import MAX_CHAPTERS
from .urls import DEFAULT_INDEX_URL
from .writer import DEFAULT_OUTPUT_NAME, write_document


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tafsir-scraper",
        description=(
            "Scrape the tefsir.ba chapter/verse commentary into a single "
            "JSON document. Runs with defaults when no arguments are given."
        ),
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=Path(DEFAULT_OUTPUT_NAME),
        help=f"Output path (default: ./{DEFAULT_OUTPUT_NAME})",
    )
    parser.add_argument("--index-url", default=DEFAULT_INDEX_URL)
    parser.add_argument(
        "--max-chapters",
        type=int,
        default=MAX_CHAPTERS,
        help=f"Stop after this many index links (capped at {MAX_CHAPTERS})",
    )
    parser.add_argument("--timeout", type=int, default=45)
    parser.add_argument("--no-progress", action="store_true")

    sub = parser.add_subparsers(dest="cmd")
    inspect_p = sub.add_parser(
        "inspect",
        help="Summarize and validate an existing tafsir.json",
    )
    inspect_p.add_argument("path", type=Path)
    inspect_p.add_argument(
        "--json",
        action="store_true",
        help="Print machine-readable JSON to stdout",
    )
    return parser


def _run_inspect(args: argparse.Namespace) -> int:
    try:
        inspected = inspect_document(args.path)
    except (OSError, ValueError) as e:
        print(str(e), file=sys.stderr)
        return 2

    if bool(args.json):
        print(json.dumps(inspected.to_dict(), indent=2))
    else:
        print(
            "inspect: "
            f"chapters={inspected.chapters_total} "
            f"verses={inspected.verses_total} "
            f"missing_original_text={inspected.verses_missing_original_text} "
            f"missing_commentary={inspected.verses_missing_commentary}"
        )
        if inspected.over_cap:
            print(f"inspect: more than {MAX_CHAPTERS} chapters")
        if inspected.chapter_order_violations:
            nums = " ".join(str(n) for n in inspected.chapter_order_violations)
            print(f"inspect: chapter_order_violations: {nums}")
        if inspected.verse_order_violations:
            nums = " ".join(str(n) for n in inspected.verse_order_violations)
            print(f"inspect: verse_order_violations: {nums}")
        for number, (declared, found) in inspected.declared_count_mismatches.items():
            print(f"- chapter {number}: declared={declared} found={found}")

    return 0 if inspected.ok else 4


def _run_scrape(args: argparse.Namespace) -> int:
    cfg = ScrapeConfig(
        index_url=str(args.index_url),
        max_chapters=int(args.max_chapters),
        timeout_s=int(args.timeout),
        show_progress=not bool(args.no_progress),
    )
    session = requests.Session()
    http = HttpClient(session, timeout_s=cfg.timeout_s)
    collector = ChapterCollector(http=http, config=cfg)

    try:
        chapters = collector.collect()
    except IndexUnavailableError as e:
        print(f"Failed to load chapter index: {e}", file=sys.stderr)
        return 2
    finally:
        session.close()

    try:
        write_document(chapters, args.out)
    except OSError as e:
        print(f"Failed to write JSON data to file: {e}", file=sys.stderr)
        return 2
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.cmd == "inspect":
        return _run_inspect(args)
    return _run_scrape(args)
