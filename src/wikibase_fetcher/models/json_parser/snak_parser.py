from typing import Any, Optional

from wikibase_fetcher.models.internal_representation.entity_ids import PropertyIdValue
from wikibase_fetcher.models.internal_representation.json_fields import JsonField
from wikibase_fetcher.models.internal_representation.snak_groups import SnakGroup
from wikibase_fetcher.models.internal_representation.snaks import (
    NoValueSnak,
    Snak,
    SomeValueSnak,
    ValueSnak,
)
from wikibase_fetcher.models.json_parser.context import ParseContext
from wikibase_fetcher.models.json_parser.value_parser import parse_value


def parse_snak(snak_json: dict[str, Any], context: ParseContext) -> Snak:
    snaktype = snak_json.get(JsonField.SNAKTYPE.value)
    prop = PropertyIdValue(local_id=snak_json[JsonField.PROPERTY.value], site_iri=context.site_iri)

    if snaktype == "value":
        return ValueSnak(
            property=prop,
            value=parse_value(snak_json[JsonField.DATAVALUE.value], context),
            datatype=snak_json.get(JsonField.DATATYPE.value),
        )
    if snaktype == "somevalue":
        return SomeValueSnak(property=prop)
    if snaktype == "novalue":
        return NoValueSnak(property=prop)

    raise ValueError(f"Unknown snak type: {snaktype}")


def parse_snak_groups(
    snaks_json: dict[str, list[dict[str, Any]]],
    order: Optional[list[str]],
    context: ParseContext,
) -> tuple[SnakGroup, ...]:
    """Parse a property -> snak list mapping into ordered snak groups.

    Groups follow ``order`` when given; properties missing from it keep
    their position in the JSON object after the ordered ones, and each
    property yields at most one group.
    """
    property_ids = list(dict.fromkeys([*(order or []), *snaks_json]))

    groups = []
    for property_id in property_ids:
        snak_list = snaks_json.get(property_id)
        if not snak_list:
            continue
        groups.append(SnakGroup(snaks=tuple(parse_snak(snak_json, context) for snak_json in snak_list)))
    return tuple(groups)
