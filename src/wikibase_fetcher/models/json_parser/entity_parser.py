from typing import Any

from pydantic import ValidationError

from wikibase_fetcher.models.exceptions import EntityParseError, WikibaseError
from wikibase_fetcher.models.internal_representation.entity import EntityDocument
from wikibase_fetcher.models.internal_representation.entity_ids import EntityIdValue, make_entity_id
from wikibase_fetcher.models.internal_representation.entity_types import EntityKind
from wikibase_fetcher.models.internal_representation.json_fields import JsonField
from wikibase_fetcher.models.internal_representation.sitelinks import SiteLink
from wikibase_fetcher.models.internal_representation.statements import Statement
from wikibase_fetcher.models.json_parser.context import ParseContext
from wikibase_fetcher.models.json_parser.statement_parser import parse_statement

# anything a malformed payload can make the parsers raise
PARSE_ERRORS = (ValidationError, ValueError, KeyError, TypeError, AttributeError, WikibaseError)


def parse_entity_document(entity_json: dict[str, Any], context: ParseContext) -> EntityDocument:
    """Build an :class:`EntityDocument` from one ``wbgetentities`` entity node.

    Sections excluded by ``context.data_filter`` are dropped, absent sections
    are empty. Any structural problem is raised as :class:`EntityParseError`.
    """
    entity_id = entity_json.get(JsonField.ID.value, "UNKNOWN") if isinstance(entity_json, dict) else "UNKNOWN"
    try:
        document = _parse_entity_document(entity_json, context)
    except PARSE_ERRORS as e:
        raise EntityParseError(str(entity_id), f"{type(e).__name__}: {e}") from e

    context.logger.debug(
        f"Parsed entity {document.id.local_id} with {len(document.statement_groups)} statement groups"
    )
    return document


def _parse_entity_document(entity_json: dict[str, Any], context: ParseContext) -> EntityDocument:
    entity_id = make_entity_id(entity_json[JsonField.ID.value], context.site_iri)
    entity_type = EntityKind(entity_json.get(JsonField.TYPE.value, entity_id.kind))
    data_filter = context.data_filter

    return EntityDocument(
        id=entity_id,
        type=entity_type,
        labels=_parse_terms(entity_json.get(JsonField.LABELS.value, {}), context),
        descriptions=_parse_terms(entity_json.get(JsonField.DESCRIPTIONS.value, {}), context),
        aliases=_parse_aliases(entity_json.get(JsonField.ALIASES.value, {}), context),
        statement_groups=(
            {}
            if data_filter.excludes_all_properties
            else _parse_statement_groups(entity_json.get(JsonField.CLAIMS.value, {}), entity_id, context)
        ),
        sitelinks=_parse_sitelinks(entity_json.get(JsonField.SITELINKS.value, {}), context),
        datatype=entity_json.get(JsonField.DATATYPE.value),
        revision_id=entity_json.get(JsonField.LAST_REVISION_ID.value, 0),
        site_iri=context.site_iri,
    )


def _parse_terms(terms_json: dict[str, dict[str, str]], context: ParseContext) -> dict[str, str]:
    return {
        lang: term_data[JsonField.VALUE.value]
        for lang, term_data in terms_json.items()
        if context.data_filter.include_language(lang)
    }


def _parse_aliases(
    aliases_json: dict[str, list[dict[str, str]]], context: ParseContext
) -> dict[str, tuple[str, ...]]:
    return {
        lang: tuple(alias_data[JsonField.VALUE.value] for alias_data in alias_list)
        for lang, alias_list in aliases_json.items()
        if context.data_filter.include_language(lang)
    }


def _parse_statement_groups(
    claims_json: dict[str, list[dict[str, Any]]],
    subject: EntityIdValue,
    context: ParseContext,
) -> dict[str, tuple[Statement, ...]]:
    statement_groups = {}
    for property_id, claim_list in claims_json.items():
        statements = tuple(parse_statement(claim_json, subject, context) for claim_json in claim_list)
        if statements:
            statement_groups[property_id] = statements
    return statement_groups


def _parse_sitelinks(sitelinks_json: dict[str, dict[str, Any]], context: ParseContext) -> dict[str, SiteLink]:
    return {
        site_key: SiteLink(
            site=sitelink_data.get(JsonField.SITE.value, site_key),
            title=sitelink_data[JsonField.TITLE.value],
            badges=tuple(sitelink_data.get(JsonField.BADGES.value, [])),
            url=sitelink_data.get(JsonField.URL.value),
        )
        for site_key, sitelink_data in sitelinks_json.items()
        if context.data_filter.include_site_link(site_key)
    }
