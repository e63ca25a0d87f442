from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..models.order_item import MAX_INTEGER


class OrderItemRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    product_id: str = Field(..., min_length=1, max_length=100)
    quantity: int = Field(..., ge=1, le=MAX_INTEGER)
    unit_price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)

    @field_validator("product_id")
    @classmethod
    def product_id_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("productId must not be blank")
        return value


class OrderItemResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    product_id: str
    quantity: int
    unit_price: Decimal
