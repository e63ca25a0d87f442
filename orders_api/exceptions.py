class OrdersError(Exception):
    """Base class for errors raised by the orders service"""

    status_code = 500
    error = "Internal server error"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class OrderValidationError(OrdersError):
    status_code = 400
    error = "Validation failed"


class OrderNotFoundError(OrdersError):
    status_code = 404
    error = "Order not found"

    def __init__(self, order_id: int):
        super().__init__(f"Order {order_id} not found")
        self.order_id = order_id


class PersistenceError(OrdersError):
    """The store rejected or could not complete a read or write"""
