from sqlalchemy import Column, Integer, String, Numeric, LargeBinary, ForeignKey
from sqlalchemy.orm import relationship
from ..db.base import Base


class Food(Base):
    __tablename__ = "foods"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(128), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)  # текущая цена в меню
    restaurant_id = Column(Integer, ForeignKey("restaurants.id"), nullable=False, index=True)
    image_data = Column(LargeBinary, nullable=True)
    image_content_type = Column(String(100), nullable=True)

    # связи
    restaurant = relationship("Restaurant", back_populates="foods")
