from typing import Any

from wikibase_fetcher.models.internal_representation.entity_ids import EntityIdValue
from wikibase_fetcher.models.internal_representation.json_fields import JsonField
from wikibase_fetcher.models.internal_representation.ranks import Rank
from wikibase_fetcher.models.internal_representation.statements import Statement
from wikibase_fetcher.models.json_parser.context import ParseContext
from wikibase_fetcher.models.json_parser.qualifier_parser import parse_qualifiers
from wikibase_fetcher.models.json_parser.reference_parser import parse_references
from wikibase_fetcher.models.json_parser.snak_parser import parse_snak


def parse_statement(
    statement_json: dict[str, Any], subject: EntityIdValue, context: ParseContext
) -> Statement:
    rank = statement_json.get(JsonField.RANK.value)

    return Statement(
        statement_id=statement_json.get(JsonField.ID.value),
        rank=Rank(rank) if rank is not None else None,
        main_snak=parse_snak(statement_json[JsonField.MAINSNAK.value], context),
        qualifiers=parse_qualifiers(statement_json, context),
        references=parse_references(statement_json.get(JsonField.REFERENCES.value, []), context),
        subject=subject,
    )
