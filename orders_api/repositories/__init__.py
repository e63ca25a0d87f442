from .order_repository import OrderRepository, SqlAlchemyOrderRepository, utcnow

__all__ = [
    "OrderRepository",
    "SqlAlchemyOrderRepository",
    "utcnow",
]
