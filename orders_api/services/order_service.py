import logging
import math
from decimal import Decimal
from typing import List, Optional

from ..exceptions import OrderNotFoundError, OrderValidationError
from ..models.order import MAX_AMOUNT, Order, OrderStatus, money
from ..models.order_item import MAX_INTEGER, OrderItem
from ..repositories.order_repository import OrderRepository
from ..schemas.order import OrderPage, OrderRequest, OrderResponse
from ..schemas.order_item import OrderItemRequest
from .mapping import to_order_response

logger = logging.getLogger(__name__)


class OrderService:
    """Create, read, update and delete orders"""

    def __init__(
            self,
            repository: OrderRepository,
            default_page_size: int = 10,
            max_page_size: int = 100
    ):
        self.repository = repository
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size

    @staticmethod
    def _build_items(items: List[OrderItemRequest]) -> List[OrderItem]:
        order_items = [
            OrderItem(
                product_id=item.product_id,
                quantity=item.quantity,
                unit_price=money(item.unit_price),
            )
            for item in items
        ]
        total = sum((item.line_total for item in order_items), Decimal("0.00"))
        if money(total) > MAX_AMOUNT:
            raise OrderValidationError(f"order total {total} exceeds the maximum of {MAX_AMOUNT}")
        return order_items

    async def create(self, request: OrderRequest) -> OrderResponse:
        order = Order(
            customer_id=request.customer_id,
            status=OrderStatus.NEW,
        )
        order.replace_items(self._build_items(request.items))

        order = await self.repository.save(order)
        logger.info(
            f"✅ Order {order.id} created for customer {order.customer_id} "
            f"({len(order.items)} items, total {order.total_amount})"
        )
        return to_order_response(order)

    async def _get_or_raise(self, order_id: int) -> Order:
        order = await self.repository.get(order_id)
        if order is None:
            logger.warning(f"⚠️ Order {order_id} not found")
            raise OrderNotFoundError(order_id)
        return order

    async def get(self, order_id: int) -> OrderResponse:
        order = await self._get_or_raise(order_id)
        return to_order_response(order)

    async def list(self, page: int = 0, size: Optional[int] = None) -> OrderPage:
        """Return one page of orders sorted by id, with page metadata"""
        if size is None:
            size = self.default_page_size
        if page < 0:
            raise OrderValidationError("page must be greater than or equal to 0")
        if page > MAX_INTEGER:
            raise OrderValidationError(f"page must be less than or equal to {MAX_INTEGER}")
        if size < 1:
            raise OrderValidationError("size must be greater than or equal to 1")
        if size > self.max_page_size:
            raise OrderValidationError(f"size must be less than or equal to {self.max_page_size}")

        total = await self.repository.count()
        orders = await self.repository.list_page(offset=page * size, limit=size)

        return OrderPage(
            orders=[to_order_response(order) for order in orders],
            total=total,
            page=page,
            size=size,
            total_pages=math.ceil(total / size),
        )

    async def update(self, order_id: int, request: OrderRequest) -> OrderResponse:
        """Replace customer and items of an existing order; status and created_at are kept"""
        order = await self._get_or_raise(order_id)
        items = self._build_items(request.items)

        order.customer_id = request.customer_id
        order.replace_items(items)

        order = await self.repository.save(order)
        logger.info(
            f"✅ Order {order.id} updated ({len(order.items)} items, total {order.total_amount})"
        )
        return to_order_response(order)

    async def delete(self, order_id: int) -> None:
        deleted = await self.repository.delete(order_id)
        if deleted:
            logger.info(f"🗑️ Order {order_id} deleted")
        else:
            logger.info(f"Order {order_id} did not exist, nothing to delete")
