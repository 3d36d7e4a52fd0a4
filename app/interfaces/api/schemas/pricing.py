"""Pricing schemas."""

from pydantic import BaseModel, ConfigDict, Field


class DiscountRequest(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    base_price: float
    discount_percent: float = Field(
        default=0.0,
        description="Porcentaje de descuento, normalmente entre 0 y 100",
    )


class DiscountResponse(BaseModel):
    base_price: float
    discount_percent: float
    final_price: float
