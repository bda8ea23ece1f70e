from typing import Any

from wikibase_fetcher.models.internal_representation.json_fields import JsonField
from wikibase_fetcher.models.internal_representation.references import Reference
from wikibase_fetcher.models.internal_representation.snak_groups import SnakGroup
from wikibase_fetcher.models.internal_representation.snaks import (
    NoValueSnak,
    Snak,
    SomeValueSnak,
    ValueSnak,
)
from wikibase_fetcher.models.internal_representation.statements import Statement
from wikibase_fetcher.models.json_serializer.value_serializer import serialize_value


def serialize_snak(snak: Snak) -> dict[str, Any]:
    snak_json: dict[str, Any] = {
        JsonField.SNAKTYPE.value: snak.snaktype,
        JsonField.PROPERTY.value: snak.property.local_id,
    }
    if isinstance(snak, ValueSnak):
        if snak.datatype is not None:
            snak_json[JsonField.DATATYPE.value] = snak.datatype
        snak_json[JsonField.DATAVALUE.value] = serialize_value(snak.value)
    elif not isinstance(snak, (SomeValueSnak, NoValueSnak)):
        raise TypeError(f"Unknown snak variant: {type(snak).__name__}")
    return snak_json


def serialize_snak_groups(snak_groups: tuple[SnakGroup, ...]) -> tuple[dict[str, list[dict[str, Any]]], list[str]]:
    """Return the property -> snaks mapping and the matching order list."""
    snaks_json: dict[str, list[dict[str, Any]]] = {}
    for group in snak_groups:
        snaks_json.setdefault(group.property.local_id, []).extend(serialize_snak(snak) for snak in group.snaks)
    return snaks_json, list(snaks_json)


def serialize_reference(reference: Reference) -> dict[str, Any]:
    snaks_json, order = serialize_snak_groups(reference.snak_groups)
    return {JsonField.SNAKS.value: snaks_json, JsonField.SNAKS_ORDER.value: order}


def serialize_statement(statement: Statement) -> dict[str, Any]:
    statement_json: dict[str, Any] = {
        JsonField.MAINSNAK.value: serialize_snak(statement.main_snak),
        JsonField.TYPE.value: "statement",
    }
    if statement.statement_id:
        statement_json[JsonField.ID.value] = statement.statement_id
    statement_json[JsonField.RANK.value] = statement.rank.value

    if statement.qualifiers:
        qualifiers_json, order = serialize_snak_groups(statement.qualifiers)
        statement_json[JsonField.QUALIFIERS.value] = qualifiers_json
        statement_json[JsonField.QUALIFIERS_ORDER.value] = order
    if statement.references:
        statement_json[JsonField.REFERENCES.value] = [
            serialize_reference(reference) for reference in statement.references
        ]
    return statement_json
