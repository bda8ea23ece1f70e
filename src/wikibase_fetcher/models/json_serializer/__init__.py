from wikibase_fetcher.models.json_serializer.entity_serializer import serialize_entity_document
from wikibase_fetcher.models.json_serializer.statement_serializer import (
    serialize_reference,
    serialize_snak,
    serialize_statement,
)
from wikibase_fetcher.models.json_serializer.value_serializer import serialize_value

__all__ = [
    "serialize_entity_document",
    "serialize_reference",
    "serialize_snak",
    "serialize_statement",
    "serialize_value",
]
