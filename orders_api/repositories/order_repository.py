"""Persistence of the Order aggregate.

An order and its items are written together: the parent row is saved and
its item rows are replaced inside one transaction, so a failed save never
leaves orphaned items behind.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Callable, List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..exceptions import PersistenceError
from ..models.order import Order
from ..models.order_item import MAX_INTEGER

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    """Naive UTC timestamp, the format stored in the orders table"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class OrderRepository(ABC):

    @abstractmethod
    async def get(self, order_id: int) -> Optional[Order]:
        """Return the order with its items, or None if it does not exist."""

    @abstractmethod
    async def list_page(self, offset: int, limit: int) -> List[Order]:
        """Return up to `limit` orders ordered by id, skipping `offset`."""

    @abstractmethod
    async def count(self) -> int:
        """Return the total number of orders."""

    @abstractmethod
    async def save(self, order: Order) -> Order:
        """Insert or update the order and replace its items; stamps timestamps."""

    @abstractmethod
    async def delete(self, order_id: int) -> bool:
        """Delete the order and its items. Returns False when nothing was deleted."""


class SqlAlchemyOrderRepository(OrderRepository):

    def __init__(self, db: AsyncSession, clock: Callable[[], datetime] = utcnow):
        self.db = db
        self.clock = clock

    async def get(self, order_id: int) -> Optional[Order]:
        if not 1 <= order_id <= MAX_INTEGER:
            # ids outside the INTEGER column cannot exist
            return None
        query = select(Order).options(selectinload(Order.items)).where(Order.id == order_id)
        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            logger.error(f"❌ Error getting order {order_id}: {e}")
            raise PersistenceError(f"Could not load order {order_id}") from e
        return result.scalar_one_or_none()

    async def list_page(self, offset: int, limit: int) -> List[Order]:
        query = (
            select(Order)
            .options(selectinload(Order.items))
            .order_by(Order.id.asc())
            .offset(offset)
            .limit(limit)
        )
        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            logger.error(f"❌ Error getting orders list: {e}")
            raise PersistenceError("Could not list orders") from e
        return list(result.scalars().all())

    async def count(self) -> int:
        try:
            result = await self.db.execute(select(func.count(Order.id)))
        except SQLAlchemyError as e:
            logger.error(f"❌ Error counting orders: {e}")
            raise PersistenceError("Could not count orders") from e
        return result.scalar() or 0

    async def save(self, order: Order) -> Order:
        order.touch(self.clock())
        # rollback expires the instance, read the id beforehand
        order_id = order.id
        try:
            self.db.add(order)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"❌ Error saving order {order_id}: {e}")
            raise PersistenceError("Could not save order") from e
        return order

    async def delete(self, order_id: int) -> bool:
        order = await self.get(order_id)
        if order is None:
            return False
        try:
            await self.db.delete(order)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"❌ Error deleting order {order_id}: {e}")
            raise PersistenceError(f"Could not delete order {order_id}") from e
        return True
