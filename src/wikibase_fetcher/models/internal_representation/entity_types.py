from enum import Enum


class EntityKind(str, Enum):
    ITEM = "item"
    PROPERTY = "property"
