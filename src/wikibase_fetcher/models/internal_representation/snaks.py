from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Literal

from ..exceptions import UnsupportedOperationError
from .entity_ids import PropertyIdValue
from .values import Value


class BaseSnak(BaseModel):
    property: PropertyIdValue

    model_config = ConfigDict(frozen=True)

    def get_value(self) -> Any:
        raise UnsupportedOperationError(
            f"{type(self).__name__} for {self.property.local_id} carries no value"
        )


class ValueSnak(BaseSnak):
    snaktype: Literal["value"] = Field(default="value", frozen=True)
    value: Value
    datatype: Optional[str] = None

    def get_value(self) -> Any:
        return self.value


class SomeValueSnak(BaseSnak):
    """The property has a value, but it is not known"""

    snaktype: Literal["somevalue"] = Field(default="somevalue", frozen=True)


class NoValueSnak(BaseSnak):
    """The property explicitly has no value"""

    snaktype: Literal["novalue"] = Field(default="novalue", frozen=True)


Snak = Annotated[Union[ValueSnak, SomeValueSnak, NoValueSnak], Field(discriminator="snaktype")]
