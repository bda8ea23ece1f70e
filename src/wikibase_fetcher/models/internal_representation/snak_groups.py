from pydantic import BaseModel, ConfigDict, model_validator

from ..exceptions import InvalidSnakGroupError
from .entity_ids import PropertyIdValue
from .snaks import Snak


class SnakGroup(BaseModel):
    """Non-empty, ordered run of snaks that all use the same property."""

    snaks: tuple[Snak, ...]

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_snaks(self) -> "SnakGroup":
        if not self.snaks:
            raise InvalidSnakGroupError("A snak group must contain at least one snak")
        first = self.snaks[0].property
        for snak in self.snaks[1:]:
            if snak.property != first:
                raise InvalidSnakGroupError(
                    f"Snak group mixes properties {first.local_id} and {snak.property.local_id}"
                )
        return self

    @property
    def property(self) -> PropertyIdValue:
        return self.snaks[0].property
