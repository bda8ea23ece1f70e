from typing import Any

from wikibase_fetcher.models.internal_representation.json_fields import JsonField
from wikibase_fetcher.models.internal_representation.references import Reference
from wikibase_fetcher.models.json_parser.context import ParseContext
from wikibase_fetcher.models.json_parser.snak_parser import parse_snak_groups


def parse_reference(reference_json: dict[str, Any], context: ParseContext) -> Reference:
    return Reference(
        snak_groups=parse_snak_groups(
            reference_json.get(JsonField.SNAKS.value, {}),
            reference_json.get(JsonField.SNAKS_ORDER.value),
            context,
        )
    )


def parse_references(references_json: list[dict[str, Any]], context: ParseContext) -> tuple[Reference, ...]:
    return tuple(parse_reference(reference_json, context) for reference_json in references_json)
