from typing import Optional

from pydantic import BaseModel, ConfigDict


class SiteLink(BaseModel):
    site: str
    title: str
    badges: tuple[str, ...] = ()
    url: Optional[str] = None

    model_config = ConfigDict(frozen=True)
