from sqlalchemy import Column, Integer, String, Numeric, Float, Boolean, Text, LargeBinary
from sqlalchemy.orm import relationship
from ..db.base import Base


class Restaurant(Base):
    __tablename__ = "restaurants"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(128), nullable=False)
    delivery_price = Column(Numeric(10, 2), nullable=True)
    delivery_time = Column(String(64), nullable=True)
    percent_for_app = Column(Float, nullable=True)
    type = Column(String(64), nullable=True)
    address = Column(String(255), nullable=True)
    cuisine_type = Column(String(64), nullable=True)
    description = Column(Text, nullable=True)
    phone_number = Column(String(32), nullable=True)
    rating = Column(Float, nullable=False, default=0)
    rating_count = Column(Integer, nullable=False, default=0)
    rating_number = Column(Float, nullable=True)
    love_count = Column(Integer, nullable=False, default=0)
    start_time = Column(String(16), nullable=True)
    end_time = Column(String(16), nullable=True)
    user_type = Column(String(32), nullable=True)
    active = Column(Boolean, nullable=False, default=True)

    image_data = Column(LargeBinary, nullable=True)
    image_content_type = Column(String(100), nullable=True)
    ad_image_data = Column(LargeBinary, nullable=True)
    ad_image_content_type = Column(String(100), nullable=True)

    # связи
    foods = relationship("Food", back_populates="restaurant", order_by="Food.id")
    orders = relationship("Order", back_populates="restaurant", order_by="Order.id")
