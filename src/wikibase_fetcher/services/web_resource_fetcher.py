import logging
from contextlib import AbstractContextManager, contextmanager
from typing import BinaryIO, Iterator, Optional, Protocol

import requests
import urllib3

from wikibase_fetcher.models.fetcher_models import FetcherConfig

logger = logging.getLogger(__name__)


class WebResourceFetcher(Protocol):
    """Transport used by the data fetcher.

    ``open_stream`` returns a context manager yielding a readable binary
    stream; leaving the ``with`` block releases the connection.
    """

    def open_stream(self, url: str) -> AbstractContextManager[BinaryIO]:
        ...


class RequestsWebResourceFetcher:
    def __init__(self, config: FetcherConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": config.user_agent})

    @contextmanager
    def open_stream(self, url: str) -> Iterator[BinaryIO]:
        logger.debug(f"GET {url}")
        response = self.session.get(url, stream=True, timeout=self.config.timeout)
        try:
            response.raise_for_status()
            response.raw.decode_content = True
            yield response.raw
        except urllib3.exceptions.HTTPError as e:
            # read errors on the raw body are not wrapped by requests
            raise requests.exceptions.ConnectionError(e) from e
        finally:
            response.close()

    def close(self) -> None:
        self.session.close()
