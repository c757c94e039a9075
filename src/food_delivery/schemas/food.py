from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from .media import ImageOut


class FoodOut(BaseModel):
    id: int
    name: str
    price: Decimal
    restaurant_id: int
    image: Optional[ImageOut] = None

    @classmethod
    def from_orm_with_image(cls, food):
        return cls(
            id=food.id,
            name=food.name,
            price=food.price,
            restaurant_id=food.restaurant_id,
            image=ImageOut.from_blob(food.image_data, food.image_content_type),
        )
