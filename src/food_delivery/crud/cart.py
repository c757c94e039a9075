from decimal import Decimal
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from food_delivery.exceptions import NotFoundError, ValidationError, storage_boundary
from food_delivery.logging_config import get_logger
from food_delivery.models import Cart, CartItem, Food, Restaurant, User

logger = get_logger(__name__)


async def load_cart(db: AsyncSession, user_id: int) -> Optional[Cart]:
    """
    Корзина пользователя с позициями и блюдами (или None).
    populate_existing, чтобы после commit не остались устаревшие данные.
    """
    stmt = (
        select(Cart)
        .where(Cart.user_id == user_id)
        .options(selectinload(Cart.items).selectinload(CartItem.food))
        .execution_options(populate_existing=True)
    )
    result = await db.execute(stmt)
    return result.scalars().first()


async def _require_cart(db: AsyncSession, user_id: int) -> Cart:
    cart = await load_cart(db, user_id)
    if not cart:
        raise NotFoundError("Cart", user_id, message="Cart not found")
    return cart


def _check_quantity(quantity: int) -> None:
    if quantity < 1:
        raise ValidationError("Quantity must be a positive integer")


def recalculate_total(cart: Cart) -> Decimal:
    """
    Пересчитывает сумму корзины по текущим позициям: Σ quantity × food.price.
    """
    total = sum((item.food.price * item.quantity for item in cart.items), Decimal("0"))
    cart.total = total.quantize(Decimal("0.01"))
    return cart.total


@storage_boundary
async def get_cart(db: AsyncSession, user_id: int) -> Cart:
    return await _require_cart(db, user_id)


@storage_boundary
async def add_item(
    db: AsyncSession, user_id: int, restaurant_id: int, food_id: int, quantity: int
) -> Cart:
    """
    Добавляет блюдо в корзину.
    Корзина привязана к одному ресторану: другой ресторан -> старая корзина удаляется целиком.
    Повторное добавление того же блюда увеличивает количество в существующей позиции.
    """
    _check_quantity(quantity)

    if not await db.get(User, user_id):
        raise NotFoundError("User", user_id)
    if not await db.get(Restaurant, restaurant_id):
        raise ValidationError(f"Restaurant with id={restaurant_id} does not exist")

    cart = await load_cart(db, user_id)

    if cart and cart.restaurant_id != restaurant_id:
        logger.info(
            "Cart invalidated by restaurant switch: user_id=%s %s -> %s",
            user_id, cart.restaurant_id, restaurant_id,
        )
        await db.delete(cart)
        # удаление должно уйти в БД до вставки новой корзины (unique user_id)
        await db.flush()
        cart = None

    if cart is None:
        cart = Cart(user_id=user_id, restaurant_id=restaurant_id, total=Decimal("0"), items=[])
        db.add(cart)

    food = await db.get(Food, food_id)
    if not food:
        raise NotFoundError("Food", food_id, message="Food item not found")
    if food.restaurant_id != restaurant_id:
        raise ValidationError(f"Food with id={food_id} does not belong to restaurant {restaurant_id}")

    line = next((item for item in cart.items if item.food_id == food_id), None)
    if line:
        line.quantity += quantity
    else:
        cart.items.append(CartItem(food_id=food.id, food=food, quantity=quantity))

    recalculate_total(cart)
    await db.commit()

    return await _require_cart(db, user_id)


async def _update_line(db: AsyncSession, user_id: int, quantity: int, match, missing_message: str) -> Cart:
    _check_quantity(quantity)
    cart = await _require_cart(db, user_id)

    line = next((item for item in cart.items if match(item)), None)
    if not line:
        raise NotFoundError("CartItem", message=missing_message)

    line.quantity = quantity
    recalculate_total(cart)
    await db.commit()

    return await _require_cart(db, user_id)


@storage_boundary
async def set_item_quantity(db: AsyncSession, user_id: int, food_id: int, quantity: int) -> Cart:
    """
    Меняет количество позиции, найденной по ID блюда.
    """
    return await _update_line(
        db, user_id, quantity, lambda item: item.food_id == food_id, "Food item not found in cart"
    )


@storage_boundary
async def set_item_quantity_by_line_id(db: AsyncSession, user_id: int, line_id: int, quantity: int) -> Cart:
    """
    Меняет количество позиции, найденной по её собственному ID.
    """
    return await _update_line(
        db, user_id, quantity, lambda item: item.id == line_id, "Item not found in cart"
    )


async def _remove_line(db: AsyncSession, user_id: int, match, missing_message: str) -> None:
    cart = await _require_cart(db, user_id)

    line = next((item for item in cart.items if match(item)), None)
    if not line:
        raise NotFoundError("CartItem", message=missing_message)

    cart.items.remove(line)
    recalculate_total(cart)
    await db.commit()


@storage_boundary
async def remove_line_by_id(db: AsyncSession, user_id: int, line_id: int) -> None:
    await _remove_line(db, user_id, lambda item: item.id == line_id, "Item not found in cart")


@storage_boundary
async def remove_line_by_food_id(db: AsyncSession, user_id: int, food_id: int) -> None:
    await _remove_line(db, user_id, lambda item: item.food_id == food_id, "Food item not found in cart")


@storage_boundary
async def clear_cart(db: AsyncSession, user_id: int) -> None:
    """
    Удаляет корзину целиком.
    """
    cart = await _require_cart(db, user_id)
    await db.delete(cart)
    await db.commit()


async def discard_cart(db: AsyncSession, user_id: int) -> bool:
    """
    Удаляет корзину без commit (используется при оформлении заказа).
    """
    cart = await load_cart(db, user_id)
    if not cart:
        return False
    await db.delete(cart)
    return True
