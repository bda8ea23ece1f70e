from pydantic import BaseModel, ConfigDict

from .entity_ids import EntityId
from .snak_groups import SnakGroup
from .snaks import Snak


class Claim(BaseModel):
    subject: EntityId
    main_snak: Snak
    qualifiers: tuple[SnakGroup, ...] = ()

    model_config = ConfigDict(frozen=True)
