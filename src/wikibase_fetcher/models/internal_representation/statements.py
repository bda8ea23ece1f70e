from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from ..exceptions import MissingRequiredFieldError
from .claims import Claim
from .entity_ids import EntityId
from .ranks import Rank
from .references import Reference
from .snak_groups import SnakGroup
from .snaks import Snak, ValueSnak

REQUIRED_FIELDS = ("main_snak", "rank", "subject")


class Statement(BaseModel):
    """A claim with an id, a rank and supporting references.

    Equality and hashing cover every field, so two statements built from
    equal parts are interchangeable. ``statement_id`` defaults to the empty
    string and ``qualifiers``/``references`` to empty tuples; ``None`` is
    accepted for these and normalized.
    """

    statement_id: str = ""
    rank: Rank
    main_snak: Snak
    qualifiers: tuple[SnakGroup, ...] = ()
    references: tuple[Reference, ...] = ()
    subject: EntityId

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def normalize_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        for field in REQUIRED_FIELDS:
            if data.get(field) is None:
                raise MissingRequiredFieldError(field)
        data = dict(data)
        if data.get("statement_id") is None:
            data["statement_id"] = ""
        for field in ("qualifiers", "references"):
            if data.get(field) is None:
                data[field] = ()
        return data

    @property
    def claim(self) -> Claim:
        return Claim(subject=self.subject, main_snak=self.main_snak, qualifiers=self.qualifiers)

    @property
    def property_id(self) -> str:
        return self.main_snak.property.local_id

    @property
    def value(self) -> Optional[Any]:
        if isinstance(self.main_snak, ValueSnak):
            return self.main_snak.value
        return None
