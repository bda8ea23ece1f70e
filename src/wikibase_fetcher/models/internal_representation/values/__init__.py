from typing import Annotated, Union

from pydantic import Field

from ..entity_ids import ItemIdValue, PropertyIdValue
from .string_value import StringValue
from .time_value import TimeValue
from .quantity_value import QuantityValue
from .globe_value import GlobeCoordinatesValue
from .monolingual_value import MonolingualTextValue

Value = Annotated[
    Union[
        ItemIdValue,
        PropertyIdValue,
        StringValue,
        TimeValue,
        QuantityValue,
        GlobeCoordinatesValue,
        MonolingualTextValue,
    ],
    Field(discriminator="kind"),
]

__all__ = [
    "Value",
    "StringValue",
    "TimeValue",
    "QuantityValue",
    "GlobeCoordinatesValue",
    "MonolingualTextValue",
]
