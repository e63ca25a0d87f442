from datetime import datetime, timezone

from ..models.order import Order
from ..models.order_item import OrderItem
from ..schemas.order import OrderResponse
from ..schemas.order_item import OrderItemResponse


def as_utc(value: datetime) -> datetime:
    """Timestamps are stored as naive UTC; responses carry the offset"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_order_item_response(item: OrderItem) -> OrderItemResponse:
    return OrderItemResponse(
        product_id=item.product_id,
        quantity=item.quantity,
        unit_price=item.unit_price,
    )


def to_order_response(order: Order) -> OrderResponse:
    """Snapshot an order as an immutable response; used by every read path"""
    return OrderResponse(
        id=order.id,
        customer_id=order.customer_id,
        items=[to_order_item_response(item) for item in order.items],
        total_amount=order.total_amount,
        status=order.status,
        created_at=as_utc(order.created_at),
        updated_at=as_utc(order.updated_at),
    )
