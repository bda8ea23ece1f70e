from typing import Any

from wikibase_fetcher.models.internal_representation.json_fields import JsonField
from wikibase_fetcher.models.internal_representation.snak_groups import SnakGroup
from wikibase_fetcher.models.json_parser.context import ParseContext
from wikibase_fetcher.models.json_parser.snak_parser import parse_snak_groups


def parse_qualifiers(statement_json: dict[str, Any], context: ParseContext) -> tuple[SnakGroup, ...]:
    return parse_snak_groups(
        statement_json.get(JsonField.QUALIFIERS.value, {}),
        statement_json.get(JsonField.QUALIFIERS_ORDER.value),
        context,
    )
