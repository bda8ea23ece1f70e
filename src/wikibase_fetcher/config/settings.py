import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

from wikibase_fetcher.models.fetcher_models import (
    WIKIDATA_API_URL,
    WIKIDATA_SITE_IRI,
    FetcherConfig,
)

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    wikibase_api_url: str = WIKIDATA_API_URL
    wikibase_site_iri: str = WIKIDATA_SITE_IRI
    user_agent: str = "WikibaseFetcher/1.0 (https://github.com/wikibase-fetcher)"
    request_timeout: float = 30
    max_ids_per_request: int = 50
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def to_fetcher_config(self) -> FetcherConfig:
        return FetcherConfig(
            api_url=self.wikibase_api_url,
            site_iri=self.wikibase_site_iri,
            user_agent=self.user_agent,
            timeout=self.request_timeout,
            max_ids_per_request=self.max_ids_per_request,
        )


# noinspection PyArgumentList
settings = Settings()

logger.debug("=== Settings Debug ===")
logger.debug(f"Wikibase API URL: {settings.wikibase_api_url}")
logger.debug(f"Wikibase Site IRI: {settings.wikibase_site_iri}")
logger.debug(f"Request Timeout: {settings.request_timeout}")
logger.debug(f"Max IDs Per Request: {settings.max_ids_per_request}")
logger.debug(f"Log Level: {settings.log_level}")
logger.debug("=== End Settings Debug ===")
