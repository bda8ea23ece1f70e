from wikibase_fetcher.models.data_filter import DocumentDataFilter
from wikibase_fetcher.models.fetcher_models import FetcherConfig
from wikibase_fetcher.services.data_fetcher import WikibaseDataFetcher

__all__ = ["DocumentDataFilter", "FetcherConfig", "WikibaseDataFetcher"]
