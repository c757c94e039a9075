from pydantic import BaseModel, conint, conlist, constr, condecimal
from typing import List, Optional
from datetime import datetime
from decimal import Decimal

from .food import FoodOut
from .user import UserBrief


class OrderItemRead(BaseModel):
    id: int
    food_id: int
    food_name: Optional[str] = None
    price: Decimal
    quantity: int

    class Config:
        from_attributes = True


class OrderItemDetail(OrderItemRead):
    food: Optional[FoodOut] = None

    @classmethod
    def from_orm_with_food(cls, item):
        return cls(
            id=item.id,
            food_id=item.food_id,
            food_name=item.food_name,
            price=item.price,
            quantity=item.quantity,
            food=FoodOut.from_orm_with_image(item.food) if item.food else None,
        )


class OrderRestaurantRead(BaseModel):
    id: int
    name: str
    address: Optional[str] = None
    phone_number: Optional[str] = None

    class Config:
        from_attributes = True


class OrderRead(BaseModel):
    id: int
    user_id: int
    restaurant_id: int
    status: str
    created_at: datetime
    total: Decimal
    count_items: int
    customer_name: Optional[str] = None
    customer_address: Optional[str] = None
    customer_phone: Optional[str] = None
    restaurant_name: Optional[str] = None
    restaurant_address: Optional[str] = None
    restaurant_phone: Optional[str] = None
    items: List[OrderItemRead] = []

    @classmethod
    def order_fields(cls, order) -> dict:
        return dict(
            id=order.id,
            user_id=order.user_id,
            restaurant_id=order.restaurant_id,
            status=order.status,
            created_at=order.created_at,
            total=order.total,
            count_items=sum(item.quantity for item in order.items),
            customer_name=order.customer_name,
            customer_address=order.customer_address,
            customer_phone=order.customer_phone,
            restaurant_name=order.restaurant_name,
            restaurant_address=order.restaurant_address,
            restaurant_phone=order.restaurant_phone,
        )

    @classmethod
    def from_orm_with_items(cls, order):
        return cls(
            **cls.order_fields(order),
            items=[OrderItemRead.model_validate(i) for i in order.items],
        )


class OrderWithFoods(OrderRead):
    items: List[OrderItemDetail] = []

    @classmethod
    def from_orm_with_foods(cls, order):
        return cls(
            **cls.order_fields(order),
            items=[OrderItemDetail.from_orm_with_food(i) for i in order.items],
        )


class OrderDetail(OrderWithFoods):
    restaurant: Optional[OrderRestaurantRead] = None
    user: Optional[UserBrief] = None

    @classmethod
    def from_orm_full(cls, order):
        return cls(
            **cls.order_fields(order),
            items=[OrderItemDetail.from_orm_with_food(i) for i in order.items],
            restaurant=OrderRestaurantRead.model_validate(order.restaurant) if order.restaurant else None,
            user=UserBrief.model_validate(order.user) if order.user else None,
        )


class OrderItemCreate(BaseModel):
    food_id: int
    quantity: conint(ge=1)
    # не передано — берём из меню на момент заказа
    food_name: Optional[str] = None
    price: Optional[condecimal(ge=0)] = None


class OrderCreate(BaseModel):
    user_id: int
    restaurant_id: int
    items: conlist(OrderItemCreate, min_length=1)
    total: condecimal(ge=0)
    customer_name: constr(strip_whitespace=True, min_length=1)
    customer_address: constr(strip_whitespace=True, min_length=1)
    customer_phone: constr(strip_whitespace=True, min_length=1)
    restaurant_name: constr(strip_whitespace=True, min_length=1)
    restaurant_address: constr(strip_whitespace=True, min_length=1)
    restaurant_phone: constr(strip_whitespace=True, min_length=1)


class OrderStatusUpdate(BaseModel):
    status: constr(strip_whitespace=True, min_length=1)

    class Config:
        extra = "forbid"
