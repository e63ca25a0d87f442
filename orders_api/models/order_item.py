from sqlalchemy import Column, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from ..database import Base

# Upper bound of the INTEGER columns (ids, quantity)
MAX_INTEGER = 2**31 - 1


class OrderItem(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)

    product_id = Column(String(100), nullable=False)

    # Quantity and price at the time of the order
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(12, 2), nullable=False)

    order = relationship("Order", back_populates="items")

    @property
    def line_total(self):
        return self.unit_price * self.quantity
