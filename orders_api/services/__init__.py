from .mapping import to_order_item_response, to_order_response
from .order_service import OrderService

__all__ = [
    "OrderService",
    "to_order_response",
    "to_order_item_response",
]
