from urllib.parse import parse_qs, urlsplit

import pytest

from wikibase_fetcher.models.data_filter import DocumentDataFilter
from wikibase_fetcher.models.fetcher_models import FetcherConfig
from wikibase_fetcher.services.data_fetcher import WikibaseDataFetcher


@pytest.fixture
def data_fetcher(fake_web_fetcher) -> WikibaseDataFetcher:
    return WikibaseDataFetcher(FetcherConfig(api_url="https://www.wikidata.org/w/api.php"), fake_web_fetcher())


def query_of(url: str) -> dict[str, list[str]]:
    return parse_qs(urlsplit(url).query)


def test_default_request(data_fetcher):
    url = data_fetcher.build_wbgetentities_url(["Q42", "P31"])
    query = query_of(url)

    assert url.startswith("https://www.wikidata.org/w/api.php?")
    assert query["action"] == ["wbgetentities"]
    assert query["format"] == ["json"]
    assert query["props"] == ["datatype|labels|aliases|descriptions|claims|sitelinks"]
    assert "ids=Q42|P31" in url
    assert "languages" not in query
    assert "sitefilter" not in query


def test_excluding_everything_requests_only_datatype(data_fetcher):
    data_fetcher.filter.language_filter = set()
    data_fetcher.filter.site_link_filter = set()
    data_fetcher.filter.property_filter = set()

    url = data_fetcher.build_wbgetentities_url(["Q42"])
    query = query_of(url)

    assert query["props"] == ["datatype"]
    assert "languages=" not in url
    assert "sitefilter=" not in url


def test_language_filter(data_fetcher):
    data_fetcher.filter.language_filter = {"fr", "en"}

    url = data_fetcher.build_wbgetentities_url(["Q42"])
    assert "languages=en|fr" in url
    assert query_of(url)["props"] == ["datatype|labels|aliases|descriptions|claims|sitelinks"]


def test_site_link_filter(data_fetcher):
    data_fetcher.filter.site_link_filter = {"enwiki", "dewiki"}

    url = data_fetcher.build_wbgetentities_url(["Q42"])
    assert "sitefilter=dewiki|enwiki" in url


def test_partial_property_filter_is_ignored(data_fetcher):
    data_fetcher.filter.property_filter = {"P31"}

    url = data_fetcher.build_wbgetentities_url(["Q42"])
    assert query_of(url)["props"] == ["datatype|labels|aliases|descriptions|claims|sitelinks"]


def test_explicit_filter_overrides_own_filter(data_fetcher):
    data_fetcher.filter.language_filter = {"de"}

    url = data_fetcher.build_wbgetentities_url(["Q42"], DocumentDataFilter(language_filter={"en"}))
    assert "languages=en" in url
    assert "languages=de" not in url


def test_base_url_query_is_kept(fake_web_fetcher):
    data_fetcher = WikibaseDataFetcher(FetcherConfig(api_url="https://example.org/w/api.php?maxlag=5"), fake_web_fetcher())

    query = query_of(data_fetcher.build_wbgetentities_url(["Q1"]))
    assert query["maxlag"] == ["5"]
    assert query["ids"] == ["Q1"]


@pytest.mark.parametrize("api_url", ["not a url", "www.wikidata.org/w/api.php", "ftp://example.org/api.php", "http://[::1/api.php"])
def test_malformed_api_url(fake_web_fetcher, api_url, caplog):
    data_fetcher = WikibaseDataFetcher(FetcherConfig(api_url=api_url), fake_web_fetcher())

    assert data_fetcher.build_wbgetentities_url(["Q42"]) is None
    assert "Error in API URL" in caplog.text
