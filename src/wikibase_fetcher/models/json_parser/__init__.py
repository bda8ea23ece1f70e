from wikibase_fetcher.models.json_parser.context import ParseContext
from wikibase_fetcher.models.json_parser.entity_parser import parse_entity_document
from wikibase_fetcher.models.json_parser.qualifier_parser import parse_qualifiers
from wikibase_fetcher.models.json_parser.reference_parser import parse_references, parse_reference
from wikibase_fetcher.models.json_parser.snak_parser import parse_snak, parse_snak_groups
from wikibase_fetcher.models.json_parser.statement_parser import parse_statement
from wikibase_fetcher.models.json_parser.value_parser import parse_value

__all__ = [
    "ParseContext",
    "parse_entity_document",
    "parse_qualifiers",
    "parse_references",
    "parse_reference",
    "parse_snak",
    "parse_snak_groups",
    "parse_statement",
    "parse_value",
]
