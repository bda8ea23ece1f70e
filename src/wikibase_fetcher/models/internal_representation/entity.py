from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .entity_ids import EntityId
from .entity_types import EntityKind
from .sitelinks import SiteLink
from .statements import Statement

MAPPING_FIELDS = ("labels", "descriptions", "aliases", "statement_groups", "sitelinks")


class EntityDocument(BaseModel):
    """Parsed entity. Mapping fields are read-only views."""

    id: EntityId
    type: EntityKind
    labels: Mapping[str, str] = Field(default_factory=dict)
    descriptions: Mapping[str, str] = Field(default_factory=dict)
    aliases: Mapping[str, tuple[str, ...]] = Field(default_factory=dict)
    statement_groups: Mapping[str, tuple[Statement, ...]] = Field(default_factory=dict)
    sitelinks: Mapping[str, SiteLink] = Field(default_factory=dict)
    datatype: Optional[str] = None
    revision_id: int = 0
    site_iri: str

    model_config = ConfigDict(frozen=True)

    @field_validator(*MAPPING_FIELDS, mode="after")
    @classmethod
    def make_read_only(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @field_serializer(*MAPPING_FIELDS)
    def dump_mapping(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return dict(value)

    @property
    def statements(self) -> Iterator[Statement]:
        for group in self.statement_groups.values():
            yield from group

    def get_statement_group(self, property_id: str) -> tuple[Statement, ...]:
        return self.statement_groups.get(property_id, ())
