from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Literal


class GlobeCoordinatesValue(BaseModel):
    kind: Literal["globecoordinate"] = Field(default="globecoordinate", frozen=True)
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-360, le=360)
    altitude: Optional[float] = None
    precision: Optional[float] = None
    globe: str = "http://www.wikidata.org/entity/Q2"

    model_config = ConfigDict(frozen=True)
