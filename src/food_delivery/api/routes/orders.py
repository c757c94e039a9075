from typing import List

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from food_delivery.crud.order import (
    checkout_cart,
    get_order,
    list_orders,
    place_order,
    update_status,
)
from food_delivery.db.session import get_async_session
from food_delivery.schemas.order import OrderCreate, OrderDetail, OrderRead, OrderStatusUpdate


router = APIRouter(tags=["orders"])


@router.get("/orders", response_model=List[OrderDetail])
async def list_orders_endpoint(db: AsyncSession = Depends(get_async_session)):
    """
    Возвращает список заказов с блюдами, рестораном и покупателем.
    """
    orders = await list_orders(db)
    return [OrderDetail.from_orm_full(o) for o in orders]


@router.get("/orders/{order_id}", response_model=OrderDetail)
async def get_order_endpoint(
    order_id: int = Path(..., description="ID заказа"),
    db: AsyncSession = Depends(get_async_session),
):
    order = await get_order(db, order_id)
    return OrderDetail.from_orm_full(order)


@router.post("/orders", response_model=OrderRead, status_code=status.HTTP_201_CREATED)
async def create_order_endpoint(order_in: OrderCreate, db: AsyncSession = Depends(get_async_session)):
    """
    Полное оформление заказа: позиции, сумма и контакты из запроса.
    """
    order = await place_order(db, order_in)
    return OrderRead.from_orm_with_items(order)


@router.post("/users/{user_id}/orders", response_model=OrderRead, status_code=status.HTTP_201_CREATED)
async def checkout_cart_endpoint(user_id: int, db: AsyncSession = Depends(get_async_session)):
    """
    Быстрое оформление заказа из текущей корзины пользователя.
    """
    order = await checkout_cart(db, user_id)
    return OrderRead.from_orm_with_items(order)


@router.put("/orders/{order_id}/status", response_model=OrderRead)
async def update_order_status(
    order_in: OrderStatusUpdate,
    order_id: int = Path(..., description="ID заказа"),
    db: AsyncSession = Depends(get_async_session),
):
    """
    Меняет статус заказа. Повторное подтверждение доставкой -> 400.
    """
    order = await update_status(db, order_id, order_in.status)
    return OrderRead.from_orm_with_items(order)
