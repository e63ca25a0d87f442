from .order import OrderRequest, OrderResponse, OrderPage
from .order_item import OrderItemRequest, OrderItemResponse

__all__ = [
    "OrderRequest",
    "OrderResponse",
    "OrderPage",
    "OrderItemRequest",
    "OrderItemResponse",
]
