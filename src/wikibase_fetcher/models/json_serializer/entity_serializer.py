from typing import Any

from wikibase_fetcher.models.internal_representation.entity import EntityDocument
from wikibase_fetcher.models.internal_representation.json_fields import JsonField
from wikibase_fetcher.models.internal_representation.sitelinks import SiteLink
from wikibase_fetcher.models.json_serializer.statement_serializer import serialize_statement


def serialize_entity_document(document: EntityDocument) -> dict[str, Any]:
    """Write a document back into the ``wbgetentities`` entity shape."""
    entity_json: dict[str, Any] = {
        JsonField.ID.value: document.id.local_id,
        JsonField.TYPE.value: document.type.value,
    }
    if document.datatype is not None:
        entity_json[JsonField.DATATYPE.value] = document.datatype
    if document.revision_id:
        entity_json[JsonField.LAST_REVISION_ID.value] = document.revision_id

    entity_json[JsonField.LABELS.value] = _serialize_terms(document.labels)
    entity_json[JsonField.DESCRIPTIONS.value] = _serialize_terms(document.descriptions)
    entity_json[JsonField.ALIASES.value] = {
        lang: [{JsonField.LANGUAGE.value: lang, JsonField.VALUE.value: alias} for alias in aliases]
        for lang, aliases in document.aliases.items()
    }
    entity_json[JsonField.CLAIMS.value] = {
        property_id: [serialize_statement(statement) for statement in statements]
        for property_id, statements in document.statement_groups.items()
    }
    entity_json[JsonField.SITELINKS.value] = {
        site_key: _serialize_sitelink(sitelink) for site_key, sitelink in document.sitelinks.items()
    }
    return entity_json


def _serialize_terms(terms: dict[str, str]) -> dict[str, dict[str, str]]:
    return {lang: {JsonField.LANGUAGE.value: lang, JsonField.VALUE.value: text} for lang, text in terms.items()}


def _serialize_sitelink(sitelink: SiteLink) -> dict[str, Any]:
    sitelink_json: dict[str, Any] = {
        JsonField.SITE.value: sitelink.site,
        JsonField.TITLE.value: sitelink.title,
        JsonField.BADGES.value: list(sitelink.badges),
    }
    if sitelink.url is not None:
        sitelink_json[JsonField.URL.value] = sitelink.url
    return sitelink_json
