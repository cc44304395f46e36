"""tafsir-scraper core library.

This package harvests the chapter/verse tafsir corpus published on tefsir.ba
into a single nested JSON document (`tafsir.json`).

Pipeline:
- index page -> chapter links
- chapter page -> metadata + verse links
- verse page -> original text + commentary
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
