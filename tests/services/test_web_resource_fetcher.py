import io

import pytest
import requests
import urllib3

from wikibase_fetcher.models.fetcher_models import FetcherConfig
from wikibase_fetcher.services.data_fetcher import WikibaseDataFetcher
from wikibase_fetcher.services.web_resource_fetcher import RequestsWebResourceFetcher


class RawStream(io.BytesIO):
    pass


class TruncatedStream(io.BytesIO):
    """Body that breaks off like a dropped connection once the sent bytes are read"""

    def read(self, size=-1):
        remaining = len(self.getvalue()) - self.tell()
        if size is None or size < 0 or size > remaining:
            raise urllib3.exceptions.ProtocolError(
                f"Connection broken: IncompleteRead({self.tell()} bytes read, 4980 more expected)"
            )
        return super().read(size)


class FakeResponse:
    def __init__(self, body: bytes, status_code: int = 200, raw: io.BytesIO | None = None):
        self.raw = raw if raw is not None else RawStream(body)
        self.status_code = status_code
        self.closed = False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def close(self):
        self.closed = True


class FakeSession:
    def __init__(self, response: FakeResponse):
        self.headers = {}
        self.response = response
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        return self.response

    def close(self):
        pass


@pytest.fixture
def config() -> FetcherConfig:
    return FetcherConfig(user_agent="TestAgent/0.1", timeout=5)


def test_open_stream_yields_body(config):
    response = FakeResponse(b'{"entities": {}}')
    session = FakeSession(response)
    web_fetcher = RequestsWebResourceFetcher(config, session=session)

    with web_fetcher.open_stream("https://example.org/w/api.php?action=wbgetentities") as stream:
        assert stream.read() == b'{"entities": {}}'
        assert not response.closed

    assert response.closed
    assert response.raw.decode_content is True
    assert session.headers["User-Agent"] == "TestAgent/0.1"
    assert session.calls == [("https://example.org/w/api.php?action=wbgetentities", {"stream": True, "timeout": 5})]


def test_response_closed_when_reader_fails(config):
    response = FakeResponse(b"{}")
    web_fetcher = RequestsWebResourceFetcher(config, session=FakeSession(response))

    with pytest.raises(ValueError):
        with web_fetcher.open_stream("https://example.org/w/api.php"):
            raise ValueError("parse failure")

    assert response.closed


def test_http_error_status_raises_and_closes(config):
    response = FakeResponse(b"", status_code=503)
    web_fetcher = RequestsWebResourceFetcher(config, session=FakeSession(response))

    with pytest.raises(requests.HTTPError):
        with web_fetcher.open_stream("https://example.org/w/api.php"):
            pass

    assert response.closed


def test_broken_body_raises_connection_error_and_closes(config):
    response = FakeResponse(b"", raw=TruncatedStream(b'{"entities": {"Q1": '))
    web_fetcher = RequestsWebResourceFetcher(config, session=FakeSession(response))

    with pytest.raises(requests.ConnectionError):
        with web_fetcher.open_stream("https://example.org/w/api.php") as stream:
            while stream.read(8):
                pass

    assert response.closed


def test_data_fetcher_survives_truncated_body(config, caplog):
    response = FakeResponse(b"", raw=TruncatedStream(b'{"entities": {"Q1": {"id": "Q1"'))
    web_fetcher = RequestsWebResourceFetcher(config, session=FakeSession(response))
    data_fetcher = WikibaseDataFetcher(config, web_fetcher)

    assert data_fetcher.get_entity_documents(["Q1"]) == {}
    assert "Could not retrieve data from" in caplog.text
    assert "IncompleteRead" in caplog.text
    assert response.closed
