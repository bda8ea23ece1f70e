class WikibaseError(Exception):
    """Base class for errors raised by wikibase_fetcher"""


class MissingRequiredFieldError(WikibaseError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required field: {field}")


class InvalidSnakGroupError(WikibaseError):
    pass


class UnsupportedOperationError(WikibaseError):
    pass


class InvalidApiUrlError(WikibaseError):
    def __init__(self, url: str, reason: str):
        self.url = url
        super().__init__(f'Error in API URL "{url}": {reason}')


class EntityParseError(WikibaseError):
    """Raised when a single entity node cannot be turned into a document"""

    def __init__(self, entity_id: str, reason: str):
        self.entity_id = entity_id
        self.reason = reason
        super().__init__(f"Error when reading JSON for entity {entity_id}: {reason}")
