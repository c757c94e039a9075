import enum
from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from ..db.base import Base


class OrderStatusEnum(str, enum.Enum):
    # статус — свободная строка, здесь только известные значения
    pending = "Pending"
    confirmed_by_delivery = "Confirmed_by_delivery"
    delivered = "Delivered"


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    restaurant_id = Column(Integer, ForeignKey("restaurants.id"), nullable=False, index=True)
    total = Column(Numeric(10, 2), nullable=False)
    status = Column(String(50), nullable=False, default=OrderStatusEnum.pending.value)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # снимок контактов на момент заказа
    customer_name = Column(String(128), nullable=True)
    customer_address = Column(String(255), nullable=True)
    customer_phone = Column(String(32), nullable=True)
    restaurant_name = Column(String(128), nullable=True)
    restaurant_address = Column(String(255), nullable=True)
    restaurant_phone = Column(String(32), nullable=True)

    # связи
    user = relationship("User", back_populates="orders")
    restaurant = relationship("Restaurant", back_populates="orders")
    items = relationship(
        "OrderItem", back_populates="order", cascade="all, delete-orphan", order_by="OrderItem.id"
    )


class OrderItem(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    food_id = Column(Integer, ForeignKey("foods.id"), nullable=False)
    food_name = Column(String(128), nullable=True)
    price = Column(Numeric(10, 2), nullable=False)  # фиксируется на момент заказа
    quantity = Column(Integer, nullable=False, default=1)

    # связи
    order = relationship("Order", back_populates="items")
    food = relationship("Food")
