from pydantic import BaseModel, ConfigDict, Field

WIKIDATA_API_URL = "https://www.wikidata.org/w/api.php"
WIKIDATA_SITE_IRI = "http://www.wikidata.org/entity/"


class FetcherConfig(BaseModel):
    api_url: str = WIKIDATA_API_URL
    site_iri: str = WIKIDATA_SITE_IRI
    user_agent: str = "WikibaseFetcher/1.0 (https://github.com/wikibase-fetcher)"
    timeout: float = 30
    max_ids_per_request: int = Field(default=50, ge=1)

    model_config = ConfigDict(frozen=True)
