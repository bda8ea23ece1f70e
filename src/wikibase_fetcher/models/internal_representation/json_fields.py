from enum import Enum


class JsonField(str, Enum):
    ID = "id"
    TYPE = "type"
    DATATYPE = "datatype"
    LABELS = "labels"
    DESCRIPTIONS = "descriptions"
    ALIASES = "aliases"
    CLAIMS = "claims"
    SITELINKS = "sitelinks"
    LAST_REVISION_ID = "lastrevid"
    MISSING = "missing"
    ERROR = "error"
    ENTITIES = "entities"
    LANGUAGE = "language"
    VALUE = "value"
    MAINSNAK = "mainsnak"
    RANK = "rank"
    QUALIFIERS = "qualifiers"
    QUALIFIERS_ORDER = "qualifiers-order"
    REFERENCES = "references"
    SNAKS = "snaks"
    SNAKS_ORDER = "snaks-order"
    SNAKTYPE = "snaktype"
    PROPERTY = "property"
    DATAVALUE = "datavalue"
    SITE = "site"
    TITLE = "title"
    BADGES = "badges"
    URL = "url"
