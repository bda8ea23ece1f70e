from typing import Any, Callable

from wikibase_fetcher.models.internal_representation.entity_ids import ItemIdValue, PropertyIdValue
from wikibase_fetcher.models.internal_representation.values import (
    GlobeCoordinatesValue,
    MonolingualTextValue,
    QuantityValue,
    StringValue,
    TimeValue,
    Value,
)
from wikibase_fetcher.models.json_parser.context import ParseContext

ENTITY_ID_PREFIXES = {"item": "Q", "property": "P"}


def parse_entity_id_value(value_json: dict[str, Any], context: ParseContext) -> Value:
    entity_type = value_json.get("entity-type")
    if entity_type not in ENTITY_ID_PREFIXES:
        raise ValueError(f"Unsupported entity type in value: {entity_type}")

    local_id = value_json.get("id")
    if local_id is None:
        local_id = f"{ENTITY_ID_PREFIXES[entity_type]}{value_json['numeric-id']}"

    if entity_type == "property":
        return PropertyIdValue(local_id=local_id, site_iri=context.site_iri)
    return ItemIdValue(local_id=local_id, site_iri=context.site_iri)


def parse_string_value(value_json: str, context: ParseContext) -> Value:
    return StringValue(value=value_json)


def parse_time_value(value_json: dict[str, Any], context: ParseContext) -> Value:
    return TimeValue(
        time=value_json["time"],
        timezone=value_json.get("timezone", 0),
        before=value_json.get("before", 0),
        after=value_json.get("after", 0),
        precision=value_json["precision"],
        calendarmodel=value_json["calendarmodel"],
    )


def parse_quantity_value(value_json: dict[str, Any], context: ParseContext) -> Value:
    return QuantityValue(
        amount=value_json["amount"],
        unit=value_json.get("unit", "1"),
        upper_bound=value_json.get("upperBound"),
        lower_bound=value_json.get("lowerBound"),
    )


def parse_globe_value(value_json: dict[str, Any], context: ParseContext) -> Value:
    return GlobeCoordinatesValue(
        latitude=value_json["latitude"],
        longitude=value_json["longitude"],
        altitude=value_json.get("altitude"),
        precision=value_json.get("precision"),
        globe=value_json.get("globe", "http://www.wikidata.org/entity/Q2"),
    )


def parse_monolingual_value(value_json: dict[str, Any], context: ParseContext) -> Value:
    return MonolingualTextValue(text=value_json["text"], language=value_json["language"])


PARSERS: dict[str, Callable[[Any, ParseContext], Value]] = {
    "wikibase-entityid": parse_entity_id_value,
    "string": parse_string_value,
    "time": parse_time_value,
    "quantity": parse_quantity_value,
    "globecoordinate": parse_globe_value,
    "monolingualtext": parse_monolingual_value,
}


def parse_value(datavalue_json: dict[str, Any], context: ParseContext) -> Value:
    datavalue_type = datavalue_json.get("type")
    parser = PARSERS.get(str(datavalue_type))
    if not parser:
        raise ValueError(f"Unsupported value type: {datavalue_type}")
    return parser(datavalue_json["value"], context)
