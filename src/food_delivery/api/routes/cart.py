from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from food_delivery.crud.cart import (
    add_item,
    clear_cart,
    get_cart,
    remove_line_by_food_id,
    remove_line_by_id,
    set_item_quantity,
    set_item_quantity_by_line_id,
)
from food_delivery.db.session import get_async_session
from food_delivery.schemas.cart import (
    CartItemAdd,
    CartItemQuantityUpdate,
    CartLineQuantityUpdate,
    CartRead,
)

router = APIRouter(prefix="/users/{user_id}/cart", tags=["cart"])


@router.get("", response_model=CartRead)
async def get_cart_endpoint(user_id: int, db: AsyncSession = Depends(get_async_session)):
    cart = await get_cart(db, user_id)
    return CartRead.from_orm_with_items(cart)


@router.post("", response_model=CartRead, status_code=status.HTTP_201_CREATED)
async def add_to_cart(user_id: int, item_in: CartItemAdd, db: AsyncSession = Depends(get_async_session)):
    """
    Добавляет блюдо в корзину. Блюдо другого ресторана сбрасывает корзину.
    """
    cart = await add_item(db, user_id, item_in.restaurant_id, item_in.food_id, item_in.quantity)
    return CartRead.from_orm_with_items(cart)


@router.put("", response_model=CartRead)
async def update_cart_item(
    user_id: int, item_in: CartItemQuantityUpdate, db: AsyncSession = Depends(get_async_session)
):
    cart = await set_item_quantity(db, user_id, item_in.food_id, item_in.quantity)
    return CartRead.from_orm_with_items(cart)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_cart_endpoint(user_id: int, db: AsyncSession = Depends(get_async_session)):
    await clear_cart(db, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/items/{food_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_cart_food(user_id: int, food_id: int, db: AsyncSession = Depends(get_async_session)):
    await remove_line_by_food_id(db, user_id, food_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{item_id}", response_model=CartRead)
async def update_cart_line(
    user_id: int,
    item_id: int,
    item_in: CartLineQuantityUpdate,
    db: AsyncSession = Depends(get_async_session),
):
    cart = await set_item_quantity_by_line_id(db, user_id, item_id, item_in.quantity)
    return CartRead.from_orm_with_items(cart)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_cart_line(user_id: int, item_id: int, db: AsyncSession = Depends(get_async_session)):
    await remove_line_by_id(db, user_id, item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
