from datetime import datetime
from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel

from ..models.order import OrderStatus
from .order_item import OrderItemRequest, OrderItemResponse


class OrderRequest(BaseModel):
    """Body of both create and update: the update is a full replace"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    customer_id: str = Field(..., min_length=1, max_length=100)
    items: List[OrderItemRequest] = Field(..., min_length=1)

    @field_validator("customer_id")
    @classmethod
    def customer_id_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("customerId must not be blank")
        return value


class OrderResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: int
    customer_id: str
    items: List[OrderItemResponse]
    total_amount: Decimal
    status: OrderStatus
    created_at: datetime
    updated_at: datetime


class OrderPage(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    orders: List[OrderResponse]
    total: int
    page: int
    size: int
    total_pages: int

    @computed_field(alias="hasNext")
    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages
