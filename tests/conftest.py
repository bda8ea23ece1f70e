import io
import json
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

import pytest

from wikibase_fetcher.config.settings import settings
from wikibase_fetcher.models.json_parser import ParseContext

TEST_DATA_JSON_DIR = Path(__file__).parent.parent / "test_data" / "json"
SITE_IRI = "http://www.wikidata.org/entity/"


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """Configure logging for all test sessions"""
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S',
        force=True
    )


@pytest.fixture
def wbgetentities_response() -> dict[str, Any]:
    """Q42 and P31 as returned by wbgetentities"""
    with open(TEST_DATA_JSON_DIR / "wbgetentities" / "Q42_P31.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def parse_context() -> ParseContext:
    return ParseContext(site_iri=SITE_IRI)


class FakeWebResourceFetcher:
    """In-memory transport: serves a fixed body and records what happened"""

    def __init__(self, body: bytes = b"{}", error: Exception | None = None):
        self.body = body
        self.error = error
        self.urls: list[str] = []
        self.streams: list[io.BytesIO] = []

    @contextmanager
    def open_stream(self, url: str) -> Iterator[io.BytesIO]:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        stream = io.BytesIO(self.body)
        self.streams.append(stream)
        try:
            yield stream
        finally:
            stream.close()


@pytest.fixture
def fake_web_fetcher():
    """Factory for a fake transport serving the given JSON payload"""

    def make(payload: Any = None, body: bytes | None = None, error: Exception | None = None):
        if body is None:
            body = json.dumps(payload if payload is not None else {}).encode("utf-8")
        return FakeWebResourceFetcher(body=body, error=error)

    return make
