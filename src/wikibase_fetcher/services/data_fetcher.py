import json
import logging
from typing import Any, Iterable, Optional
from urllib.parse import SplitResult, parse_qsl, urlencode, urlsplit, urlunsplit

import requests
from pydantic import BaseModel, ConfigDict, Field

from wikibase_fetcher.config.settings import settings
from wikibase_fetcher.models.data_filter import DocumentDataFilter
from wikibase_fetcher.models.exceptions import EntityParseError, InvalidApiUrlError
from wikibase_fetcher.models.fetcher_models import FetcherConfig
from wikibase_fetcher.models.internal_representation.entity import EntityDocument
from wikibase_fetcher.models.internal_representation.json_fields import JsonField
from wikibase_fetcher.models.json_parser import ParseContext, parse_entity_document
from wikibase_fetcher.services.web_resource_fetcher import RequestsWebResourceFetcher, WebResourceFetcher

logger = logging.getLogger(__name__)


class WikibaseDataFetcher(BaseModel):
    """Fetches entity documents through the ``wbgetentities`` API action.

    Only anonymous, read-only access is supported. ``filter`` restricts what
    is requested; it is read once at the start of every call, so changing it
    only affects later calls. Filtering single properties is not supported
    and such filters are ignored; excluding all properties drops statements.
    """

    config: FetcherConfig
    web_resource_fetcher: Any = Field(default=None, exclude=True)
    filter: DocumentDataFilter = Field(default_factory=DocumentDataFilter)
    logger: logging.Logger = Field(default_factory=lambda: logger, exclude=True)

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def __init__(
        self,
        config: Optional[FetcherConfig] = None,
        web_resource_fetcher: Optional[WebResourceFetcher] = None,
        **kwargs,
    ):
        config = config or settings.to_fetcher_config()
        super().__init__(
            config=config,
            web_resource_fetcher=web_resource_fetcher or RequestsWebResourceFetcher(config),
            **kwargs,
        )

    @property
    def api_url(self) -> str:
        return self.config.api_url

    @property
    def site_iri(self) -> str:
        return self.config.site_iri

    def get_entity_document(self, entity_id: str) -> Optional[EntityDocument]:
        return self.get_entity_documents([entity_id]).get(entity_id)

    def get_entity_documents(self, entity_ids: Iterable[str]) -> dict[str, EntityDocument]:
        """Fetch documents for the given ids (e.g. "Q42", "P31").

        The result only holds ids that were requested and could be fetched
        and parsed; fetch and parse failures are logged, never raised. A bare
        string is rejected with ``TypeError``; use ``get_entity_document``.
        """
        if isinstance(entity_ids, str):
            raise TypeError("entity_ids must be a collection of ids, not a single string")
        entity_ids = list(entity_ids)
        if not entity_ids:
            return {}

        data_filter = self.filter.snapshot()
        context = ParseContext(site_iri=self.site_iri, data_filter=data_filter, logger=self.logger)

        result: dict[str, EntityDocument] = {}
        batch_size = self.config.max_ids_per_request
        for start in range(0, len(entity_ids), batch_size):
            batch = entity_ids[start:start + batch_size]
            url = self.build_wbgetentities_url(batch, data_filter)
            if url is None:
                break
            result.update(self._fetch_batch(url, batch, context))

        self.logger.info(f"Fetched {len(result)} of {len(entity_ids)} requested entities")
        return result

    def build_wbgetentities_url(
        self, entity_ids: list[str], data_filter: Optional[DocumentDataFilter] = None
    ) -> Optional[str]:
        """Return the request URL, or None if the API URL is malformed."""
        if data_filter is None:
            data_filter = self.filter.snapshot()

        try:
            base = _split_api_url(self.api_url)
        except InvalidApiUrlError as e:
            self.logger.error(str(e))
            return None

        params = dict(parse_qsl(base.query))
        params["action"] = "wbgetentities"
        params["format"] = "json"
        params["props"] = _build_props(data_filter)
        if data_filter.language_filter and not data_filter.excludes_all_languages:
            params["languages"] = _implode(sorted(data_filter.language_filter))
        if data_filter.site_link_filter and not data_filter.excludes_all_site_links:
            params["sitefilter"] = _implode(sorted(data_filter.site_link_filter))
        params["ids"] = _implode(entity_ids)

        return urlunsplit((base.scheme, base.netloc, base.path, urlencode(params, safe="|"), ""))

    def _fetch_batch(self, url: str, requested_ids: list[str], context: ParseContext) -> dict[str, EntityDocument]:
        result: dict[str, EntityDocument] = {}
        requested = set(requested_ids)
        self.logger.debug(f"Requesting {len(requested_ids)} entities: {url}")

        try:
            with self.web_resource_fetcher.open_stream(url) as stream:
                root = json.load(stream)
                if not isinstance(root, dict):
                    self.logger.error(f"Unexpected response from {url}: top-level JSON is not an object")
                    return result

                if JsonField.ERROR.value in root:
                    self._log_api_error(root[JsonField.ERROR.value])
                # fall through: maybe there are some entities anyway

                entities = root.get(JsonField.ENTITIES.value) or {}
                if not isinstance(entities, dict):
                    self.logger.error(f"Unexpected response from {url}: entities is not an object")
                    return result
                for entity_json in entities.values():
                    if isinstance(entity_json, dict) and JsonField.MISSING.value in entity_json:
                        continue
                    try:
                        document = parse_entity_document(entity_json, context)
                    except EntityParseError as e:
                        self.logger.error(str(e))
                        continue

                    local_id = document.id.local_id
                    if local_id not in requested:
                        self.logger.warning(f"Ignoring entity {local_id} which was not requested")
                        continue
                    result[local_id] = document

        except (requests.RequestException, OSError) as e:
            self.logger.error(f"Could not retrieve data from {url}. Error:\n{e}")
        except ValueError as e:
            self.logger.error(f"Could not parse JSON response from {url}: {e}")

        return result

    def _log_api_error(self, error: Any) -> None:
        if not isinstance(error, dict):
            error = {}
        info = error.get("info", "DESCRIPTION MISSING")
        code = error.get("code", "UNKNOWN ERROR CODE")
        self.logger.error(f"Error when reading data from API: {info} [{code}]")


def _split_api_url(api_url: str) -> SplitResult:
    try:
        parts = urlsplit(api_url)
    except ValueError as e:
        raise InvalidApiUrlError(api_url, str(e)) from e
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise InvalidApiUrlError(api_url, "expected an absolute http(s) URL")
    if any(char.isspace() for char in api_url):
        raise InvalidApiUrlError(api_url, "URL contains whitespace")
    return parts


def _build_props(data_filter: DocumentDataFilter) -> str:
    props = ["datatype"]
    if not data_filter.excludes_all_languages:
        props += ["labels", "aliases", "descriptions"]
    if not data_filter.excludes_all_properties:
        props.append("claims")
    if not data_filter.excludes_all_site_links:
        props.append("sitelinks")
    return _implode(props)


def _implode(values: Iterable[Any]) -> str:
    return "|".join(str(value) for value in values)
