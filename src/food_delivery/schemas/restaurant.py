from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel

from .media import ImageOut
from .order import OrderRead

class RestaurantBase(BaseModel):
    name: str
    delivery_price: Optional[Decimal] = None
    delivery_time: Optional[str] = None
    percent_for_app: Optional[float] = None
    type: Optional[str] = None
    address: Optional[str] = None
    cuisine_type: Optional[str] = None
    description: Optional[str] = None
    phone_number: Optional[str] = None
    rating: float = 0
    rating_count: int = 0
    rating_number: Optional[float] = None
    love_count: int = 0
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    user_type: Optional[str] = None
    active: bool = True

class RestaurantCreate(RestaurantBase):
    pass


class RestaurantOut(RestaurantBase):
    id: int
    image: Optional[ImageOut] = None
    ad_image: Optional[ImageOut] = None

    @classmethod
    def restaurant_fields(cls, restaurant) -> dict:
        data = {name: getattr(restaurant, name) for name in RestaurantBase.model_fields}
        data.update(
            id=restaurant.id,
            image=ImageOut.from_blob(restaurant.image_data, restaurant.image_content_type),
            ad_image=ImageOut.from_blob(restaurant.ad_image_data, restaurant.ad_image_content_type),
        )
        return data

    @classmethod
    def from_orm_with_image(cls, restaurant):
        return cls(**cls.restaurant_fields(restaurant))

class RestaurantDetail(RestaurantOut):
    orders: List[OrderRead] = []

    @classmethod
    def from_orm_with_orders(cls, restaurant):
        return cls(
            **cls.restaurant_fields(restaurant),
            orders=[OrderRead.from_orm_with_items(o) for o in restaurant.orders],
        )
