from typing import Iterator

from pydantic import BaseModel, ConfigDict

from .snak_groups import SnakGroup
from .snaks import Snak


class Reference(BaseModel):
    snak_groups: tuple[SnakGroup, ...] = ()

    model_config = ConfigDict(frozen=True)

    @property
    def snaks(self) -> Iterator[Snak]:
        for group in self.snak_groups:
            yield from group.snaks
