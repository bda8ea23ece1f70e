from decimal import Decimal, InvalidOperation
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing_extensions import Literal


class QuantityValue(BaseModel):
    """Decimal quantity with optional bounds.

    Amounts are kept as the decimal strings of the wire format ("+34.5") so
    that re-serialization is lossless.
    """

    kind: Literal["quantity"] = Field(default="quantity", frozen=True)
    amount: str
    unit: str = "1"
    upper_bound: Optional[str] = None
    lower_bound: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("amount", "upper_bound", "lower_bound")
    @classmethod
    def validate_numeric(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            try:
                Decimal(v)
            except InvalidOperation:
                raise ValueError(f"Value must be a valid number, got: {v}")
        return v

    @model_validator(mode="after")
    def validate_bounds(self) -> "QuantityValue":
        amount = Decimal(self.amount)
        upper = Decimal(self.upper_bound) if self.upper_bound is not None else None
        lower = Decimal(self.lower_bound) if self.lower_bound is not None else None

        if lower is not None and lower > amount:
            raise ValueError("Lower bound cannot be greater than amount")
        if upper is not None and upper < amount:
            raise ValueError("Upper bound cannot be less than amount")
        return self
