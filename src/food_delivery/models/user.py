import enum
from sqlalchemy import Column, Integer, String, DateTime, LargeBinary, ForeignKey, func
from sqlalchemy.orm import relationship
from ..db.base import Base


class RoleEnum(str, enum.Enum):
    customer = "customer"
    restaurant = "restaurant"
    delivery = "delivery"
    admin = "admin"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(128), nullable=False)
    phone = Column(String(32), nullable=True)
    location = Column(String(255), nullable=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(128), nullable=False)
    # метка роли: произвольная строка, известные значения в RoleEnum
    role = Column(String(32), nullable=False, default=RoleEnum.customer.value)
    restaurant_id = Column(Integer, ForeignKey("restaurants.id"), nullable=True)
    image_data = Column(LargeBinary, nullable=True)
    image_content_type = Column(String(100), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # связи
    cart = relationship("Cart", back_populates="user", uselist=False)
    orders = relationship("Order", back_populates="user")
