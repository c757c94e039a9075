from sqlalchemy import Column, Integer, Numeric, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from ..db.base import Base


class Cart(Base):
    __tablename__ = "carts"

    id = Column(Integer, primary_key=True, index=True)
    # не больше одной корзины на пользователя
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True)
    restaurant_id = Column(Integer, ForeignKey("restaurants.id"), nullable=False)
    total = Column(Numeric(10, 2), nullable=False, default=0)
    version = Column(Integer, nullable=False)

    # связи
    user = relationship("User", back_populates="cart")
    restaurant = relationship("Restaurant")
    items = relationship(
        "CartItem", back_populates="cart", cascade="all, delete-orphan", order_by="CartItem.id"
    )

    # оптимистичная блокировка: UPDATE ... WHERE version = :old
    __mapper_args__ = {"version_id_col": version}


class CartItem(Base):
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True, index=True)
    cart_id = Column(Integer, ForeignKey("carts.id", ondelete="CASCADE"), nullable=False)
    food_id = Column(Integer, ForeignKey("foods.id"), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)

    # связи
    cart = relationship("Cart", back_populates="items")
    food = relationship("Food")

    # одна позиция на блюдо в корзине
    __table_args__ = (UniqueConstraint("cart_id", "food_id", name="uq_cart_items_cart_food"),)
