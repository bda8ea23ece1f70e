import re
from typing import Annotated, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing_extensions import Literal

ITEM_ID_PATTERN = re.compile(r"^Q[1-9][0-9]*$")
PROPERTY_ID_PATTERN = re.compile(r"^P[1-9][0-9]*$")


class EntityIdValue(BaseModel):
    """Identifier of an entity, tied to the site it belongs to.

    Two ids are equal when they have the same kind, local id and site IRI.
    """

    local_id: str
    site_iri: str

    model_config = ConfigDict(frozen=True)

    @property
    def iri(self) -> str:
        return f"{self.site_iri}{self.local_id}"

    def __str__(self) -> str:
        return self.local_id


class ItemIdValue(EntityIdValue):
    kind: Literal["item"] = Field(default="item", frozen=True)

    @field_validator("local_id")
    @classmethod
    def validate_local_id(cls, v: str) -> str:
        if not ITEM_ID_PATTERN.match(v):
            raise ValueError(f"Item id must look like 'Q42', got: {v}")
        return v


class PropertyIdValue(EntityIdValue):
    kind: Literal["property"] = Field(default="property", frozen=True)

    @field_validator("local_id")
    @classmethod
    def validate_local_id(cls, v: str) -> str:
        if not PROPERTY_ID_PATTERN.match(v):
            raise ValueError(f"Property id must look like 'P31', got: {v}")
        return v


EntityId = Annotated[Union[ItemIdValue, PropertyIdValue], Field(discriminator="kind")]


def make_entity_id(local_id: str, site_iri: str) -> ItemIdValue | PropertyIdValue:
    if local_id.startswith("P"):
        return PropertyIdValue(local_id=local_id, site_iri=site_iri)
    return ItemIdValue(local_id=local_id, site_iri=site_iri)
