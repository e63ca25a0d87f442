from datetime import datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum as PyEnum
from typing import Iterable

from sqlalchemy import Column, DateTime, Enum, Integer, Numeric, String
from sqlalchemy.orm import relationship

from ..database import Base
from .order_item import OrderItem

CENTS = Decimal("0.01")
# Largest value a NUMERIC(12, 2) column holds
MAX_AMOUNT = Decimal("9999999999.99")


def money(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


class OrderStatus(str, PyEnum):
    NEW = "NEW"
    PAID = "PAID"
    SHIPPED = "SHIPPED"
    CANCELED = "CANCELED"


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    customer_id = Column(String(100), nullable=False, index=True)

    status = Column(Enum(OrderStatus, name="order_status"), default=OrderStatus.NEW, nullable=False)
    total_amount = Column(Numeric(12, 2), nullable=False, default=Decimal("0.00"))

    # Naive UTC, stamped by the repository on save
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by=OrderItem.id,
    )

    def replace_items(self, items: Iterable[OrderItem]) -> None:
        """Drop the current line items, attach the new ones and recompute the total."""
        self.items = list(items)
        self.recalculate_total()

    def recalculate_total(self) -> Decimal:
        total = sum(
            (item.line_total for item in self.items),
            Decimal("0.00"),
        )
        self.total_amount = money(total)
        return self.total_amount

    def touch(self, now: datetime) -> None:
        if self.created_at is None:
            self.created_at = now
            self.updated_at = now
            return
        # updated_at has to move forward even if the clock did not
        if self.updated_at is not None and now <= self.updated_at:
            now = self.updated_at + timedelta(microseconds=1)
        self.updated_at = now

    def __repr__(self) -> str:
        return f"<Order id={self.id} customer_id={self.customer_id!r} status={self.status}>"
