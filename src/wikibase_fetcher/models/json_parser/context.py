import logging

from pydantic import BaseModel, ConfigDict, Field

from wikibase_fetcher.models.data_filter import DocumentDataFilter

logger = logging.getLogger(__name__)


class ParseContext(BaseModel):
    """Everything the parsers need that is not in the JSON payload itself."""

    site_iri: str
    data_filter: DocumentDataFilter = Field(default_factory=DocumentDataFilter)
    logger: logging.Logger = Field(default_factory=lambda: logger, exclude=True)

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
