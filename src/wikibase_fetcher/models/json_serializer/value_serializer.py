from typing import Any

from wikibase_fetcher.models.internal_representation.entity_ids import EntityIdValue
from wikibase_fetcher.models.internal_representation.values import (
    GlobeCoordinatesValue,
    MonolingualTextValue,
    QuantityValue,
    StringValue,
    TimeValue,
    Value,
)


def serialize_value(value: Value) -> dict[str, Any]:
    """Return the ``datavalue`` object for a snak value."""
    if isinstance(value, EntityIdValue):
        return {
            "value": {
                "entity-type": value.kind,
                "numeric-id": int(value.local_id[1:]),
                "id": value.local_id,
            },
            "type": "wikibase-entityid",
        }
    if isinstance(value, StringValue):
        return {"value": value.value, "type": "string"}
    if isinstance(value, TimeValue):
        return {
            "value": {
                "time": value.time,
                "timezone": value.timezone,
                "before": value.before,
                "after": value.after,
                "precision": value.precision,
                "calendarmodel": value.calendarmodel,
            },
            "type": "time",
        }
    if isinstance(value, QuantityValue):
        quantity: dict[str, Any] = {"amount": value.amount, "unit": value.unit}
        if value.upper_bound is not None:
            quantity["upperBound"] = value.upper_bound
        if value.lower_bound is not None:
            quantity["lowerBound"] = value.lower_bound
        return {"value": quantity, "type": "quantity"}
    if isinstance(value, GlobeCoordinatesValue):
        return {
            "value": {
                "latitude": value.latitude,
                "longitude": value.longitude,
                "altitude": value.altitude,
                "precision": value.precision,
                "globe": value.globe,
            },
            "type": "globecoordinate",
        }
    if isinstance(value, MonolingualTextValue):
        return {"value": {"text": value.text, "language": value.language}, "type": "monolingualtext"}

    raise TypeError(f"Cannot serialize value of type {type(value).__name__}")
