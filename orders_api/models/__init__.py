from .order_item import MAX_INTEGER, OrderItem
from .order import MAX_AMOUNT, Order, OrderStatus, money

__all__ = [
    "MAX_AMOUNT",
    "MAX_INTEGER",
    "Order",
    "OrderItem",
    "OrderStatus",
    "money",
]
