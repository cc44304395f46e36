from __future__ import annotations

import pytest

from tafsir_scraper.http_client import HttpClient
from tests.helpers import FakeSession


@pytest.fixture
def make_http():
    def _make(routes: dict[str, object]) -> tuple[HttpClient, FakeSession]:
        session = FakeSession(routes)
        return HttpClient(session, timeout_s=5), session  # type: ignore[arg-type]

    return _make
