from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from food_delivery.crud.cart import discard_cart, load_cart
from food_delivery.exceptions import (
    ConflictError,
    NotFoundError,
    ValidationError,
    storage_boundary,
)
from food_delivery.logging_config import get_logger
from food_delivery.models import Food, Order, OrderItem, OrderStatusEnum, Restaurant, User
from food_delivery.schemas.order import OrderCreate

logger = get_logger(__name__)

CONFIRMED_BY_DELIVERY = OrderStatusEnum.confirmed_by_delivery.value


@storage_boundary
async def list_orders(db: AsyncSession) -> List[Order]:
    """
    Возвращает все заказы.
    Подгружаем items -> food, restaurant и user.
    """
    stmt = (
        select(Order)
        .options(
            selectinload(Order.items).selectinload(OrderItem.food),
            selectinload(Order.restaurant),
            selectinload(Order.user),
        )
        .order_by(Order.id)
    )
    result = await db.execute(stmt)
    return result.scalars().unique().all()


@storage_boundary
async def list_orders_for_restaurant(db: AsyncSession, restaurant_id: int) -> List[Order]:
    """
    Заказы одного ресторана, только с подгруженными блюдами.
    """
    if not await db.get(Restaurant, restaurant_id):
        raise NotFoundError("Restaurant", restaurant_id)

    stmt = (
        select(Order)
        .where(Order.restaurant_id == restaurant_id)
        .options(selectinload(Order.items).selectinload(OrderItem.food))
        .order_by(Order.id)
    )
    result = await db.execute(stmt)
    return result.scalars().unique().all()


@storage_boundary
async def get_order(db: AsyncSession, order_id: int) -> Order:
    """
    Возвращает заказ по ID с подгруженными items, food, restaurant и user.
    Предотвращает MissingGreenlet при сериализации.
    """
    stmt = (
        select(Order)
        .where(Order.id == order_id)
        .options(
            selectinload(Order.items).selectinload(OrderItem.food),
            selectinload(Order.restaurant),
            selectinload(Order.user),
        )
        .execution_options(populate_existing=True)
    )
    result = await db.execute(stmt)
    order = result.scalars().unique().first()
    if not order:
        raise NotFoundError("Order", order_id, message="Order not found")
    return order


@storage_boundary
async def place_order(db: AsyncSession, order_in: OrderCreate) -> Order:
    """
    Полное оформление заказа: позиции и контакты передаёт клиент.
    Сумма берётся из запроса и не перепроверяется.
    Заказ привязывается к ресторану, корзина пользователя удаляется.
    """
    restaurant = await db.get(Restaurant, order_in.restaurant_id)
    if not restaurant:
        raise NotFoundError("Restaurant", order_in.restaurant_id)

    if not await db.get(User, order_in.user_id):
        raise ValidationError(f"User with id={order_in.user_id} does not exist")

    food_ids = {item.food_id for item in order_in.items}
    result = await db.execute(select(Food).where(Food.id.in_(food_ids)))
    foods = {food.id: food for food in result.scalars().all()}
    missing = sorted(food_ids - foods.keys())
    if missing:
        raise ValidationError(f"Food items do not exist: {missing}")

    order = Order(
        user_id=order_in.user_id,
        total=order_in.total,
        status=OrderStatusEnum.pending.value,
        customer_name=order_in.customer_name,
        customer_address=order_in.customer_address,
        customer_phone=order_in.customer_phone,
        restaurant_name=order_in.restaurant_name,
        restaurant_address=order_in.restaurant_address,
        restaurant_phone=order_in.restaurant_phone,
        items=[
            OrderItem(
                food_id=item.food_id,
                food_name=item.food_name if item.food_name is not None else foods[item.food_id].name,
                price=item.price if item.price is not None else foods[item.food_id].price,
                quantity=item.quantity,
            )
            for item in order_in.items
        ],
    )
    # привязка к ресторану: заказ попадает в restaurant.orders
    order.restaurant = restaurant
    db.add(order)

    await discard_cart(db, order_in.user_id)
    await db.commit()

    logger.info(
        "Order placed: order_id=%s user_id=%s restaurant_id=%s total=%s",
        order.id, order.user_id, order.restaurant_id, order.total,
    )
    return await get_order(db, order.id)


@storage_boundary
async def checkout_cart(db: AsyncSession, user_id: int) -> Order:
    """
    Быстрое оформление: заказ собирается из корзины пользователя.
    Контакты копируются из профиля пользователя и карточки ресторана.
    """
    user = await db.get(User, user_id)
    if not user:
        raise NotFoundError("User", user_id)

    cart = await load_cart(db, user_id)
    if not cart:
        raise NotFoundError("Cart", user_id, message="Cart not found")
    if not cart.items:
        raise ValidationError("Cart is empty")

    restaurant = await db.get(Restaurant, cart.restaurant_id)
    if not restaurant:
        raise ValidationError(f"Restaurant with id={cart.restaurant_id} does not exist")

    order = Order(
        user_id=user_id,
        total=cart.total,
        status=OrderStatusEnum.pending.value,
        customer_name=user.name,
        customer_address=user.location,
        customer_phone=user.phone,
        restaurant_name=restaurant.name,
        restaurant_address=restaurant.address,
        restaurant_phone=restaurant.phone_number,
        items=[
            OrderItem(
                food_id=line.food_id,
                food_name=line.food.name,
                price=line.food.price,
                quantity=line.quantity,
            )
            for line in cart.items
        ],
    )
    order.restaurant = restaurant
    db.add(order)

    await db.delete(cart)
    await db.commit()

    logger.info(
        "Cart checked out: order_id=%s user_id=%s total=%s", order.id, user_id, order.total
    )
    return await get_order(db, order.id)


@storage_boundary
async def update_status(db: AsyncSession, order_id: int, new_status: str) -> Order:
    """
    Меняет статус заказа. Переходы не ограничены, кроме одного:
    повторное Confirmed_by_delivery отклоняется.
    """
    order = await db.get(Order, order_id)
    if not order:
        raise NotFoundError("Order", order_id, message="Order not found")

    if new_status == CONFIRMED_BY_DELIVERY and order.status == CONFIRMED_BY_DELIVERY:
        raise ConflictError("Order already confirmed by delivery")

    old_status = order.status
    order.status = new_status
    await db.commit()

    logger.info("Order status changed: order_id=%s %s -> %s", order_id, old_status, new_status)
    return await get_order(db, order_id)
