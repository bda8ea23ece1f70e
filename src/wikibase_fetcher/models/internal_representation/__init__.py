from .ranks import Rank
from .entity_types import EntityKind
from .entity_ids import EntityId, EntityIdValue, ItemIdValue, PropertyIdValue, make_entity_id
from .values import (
    Value,
    StringValue,
    TimeValue,
    QuantityValue,
    GlobeCoordinatesValue,
    MonolingualTextValue,
)
from .snaks import Snak, ValueSnak, SomeValueSnak, NoValueSnak
from .snak_groups import SnakGroup
from .references import Reference
from .claims import Claim
from .statements import Statement
from .sitelinks import SiteLink
from .entity import EntityDocument
from .adapters import statement_from_claim

__all__ = [
    "Rank",
    "EntityKind",
    "EntityId",
    "EntityIdValue",
    "ItemIdValue",
    "PropertyIdValue",
    "make_entity_id",
    "Value",
    "StringValue",
    "TimeValue",
    "QuantityValue",
    "GlobeCoordinatesValue",
    "MonolingualTextValue",
    "Snak",
    "ValueSnak",
    "SomeValueSnak",
    "NoValueSnak",
    "SnakGroup",
    "Reference",
    "Claim",
    "Statement",
    "SiteLink",
    "EntityDocument",
    "statement_from_claim",
]
