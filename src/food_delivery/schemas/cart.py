from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, conint

from .food import FoodOut


class CartItemRead(BaseModel):
    id: int
    food_id: int
    quantity: int
    food: Optional[FoodOut] = None

    @classmethod
    def from_orm_with_food(cls, item):
        return cls(
            id=item.id,
            food_id=item.food_id,
            quantity=item.quantity,
            food=FoodOut.from_orm_with_image(item.food) if item.food else None,
        )


class CartRead(BaseModel):
    id: int
    user_id: int
    restaurant_id: int
    total: Decimal
    items: List[CartItemRead] = []

    @classmethod
    def from_orm_with_items(cls, cart):
        return cls(
            id=cart.id,
            user_id=cart.user_id,
            restaurant_id=cart.restaurant_id,
            total=cart.total,
            items=[CartItemRead.from_orm_with_food(i) for i in cart.items],
        )


class CartItemAdd(BaseModel):
    restaurant_id: int
    food_id: int
    quantity: conint(ge=1) = 1


class CartItemQuantityUpdate(BaseModel):
    food_id: int
    quantity: conint(ge=1)


class CartLineQuantityUpdate(BaseModel):
    quantity: conint(ge=1)
