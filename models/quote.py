"""
Price output model for the Salon Timeline Engine.
"""

from pydantic import BaseModel, Field, ConfigDict, model_validator


class PriceBreakdown(BaseModel):
    """
    The billable result of a reservation.
    total_price is never negative: an oversized discount clamps it to zero.
    """
    base_price: int = Field(ge=0)
    options_price: int = Field(ge=0)
    nomination_fee: int = Field(ge=0)
    discount_amount: int = Field(default=0, ge=0)
    total_price: int = Field(ge=0)
    total_duration_minutes: int = Field(ge=0)

    @model_validator(mode='after')
    def validate_total(self):
        expected = max(0, self.base_price + self.options_price + self.nomination_fee - self.discount_amount)
        if self.total_price != expected:
            raise ValueError(f"total_price {self.total_price} does not match components ({expected})")
        return self

    model_config = ConfigDict(frozen=True, json_schema_extra={
        "example": {
            "base_price": 6000,
            "options_price": 3000,
            "nomination_fee": 1000,
            "discount_amount": 0,
            "total_price": 10000,
            "total_duration_minutes": 90
        }
    })
