from decimal import Decimal
from typing import List, Optional

from sqlalchemy import select, desc
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from food_delivery.exceptions import NotFoundError, storage_boundary
from food_delivery.logging_config import get_logger
from food_delivery.models import Food, Order, Restaurant
from food_delivery.schemas.media import ImageUpload
from food_delivery.schemas.restaurant import RestaurantCreate

logger = get_logger(__name__)

TOP_LIMIT = 10


@storage_boundary
async def create_restaurant(
    db: AsyncSession,
    restaurant_in: RestaurantCreate,
    image: Optional[ImageUpload] = None,
    ad_image: Optional[ImageUpload] = None,
) -> Restaurant:
    restaurant = Restaurant(**restaurant_in.model_dump())
    if image is not None:
        restaurant.image_data = image.data
        restaurant.image_content_type = image.content_type
    if ad_image is not None:
        restaurant.ad_image_data = ad_image.data
        restaurant.ad_image_content_type = ad_image.content_type

    db.add(restaurant)
    await db.commit()
    logger.info("Restaurant created: restaurant_id=%s", restaurant.id)
    return restaurant


@storage_boundary
async def list_restaurants(db: AsyncSession) -> List[Restaurant]:
    result = await db.execute(select(Restaurant).order_by(Restaurant.id))
    return result.scalars().all()


@storage_boundary
async def get_restaurant(db: AsyncSession, restaurant_id: int, with_orders: bool = False) -> Restaurant:
    """
    Возвращает ресторан по ID. with_orders=True подгружает заказы с позициями.
    """
    stmt = select(Restaurant).where(Restaurant.id == restaurant_id)
    if with_orders:
        stmt = stmt.options(selectinload(Restaurant.orders).selectinload(Order.items))

    result = await db.execute(stmt)
    restaurant = result.scalars().first()
    if not restaurant:
        raise NotFoundError("Restaurant", restaurant_id)
    return restaurant


@storage_boundary
async def list_foods_for(db: AsyncSession, restaurant_id: int) -> List[Food]:
    """
    Меню ресторана в порядке id, чтобы повторные чтения совпадали.
    """
    await get_restaurant(db, restaurant_id)
    result = await db.execute(
        select(Food).where(Food.restaurant_id == restaurant_id).order_by(Food.id)
    )
    return result.scalars().all()


@storage_boundary
async def list_all_foods(db: AsyncSession) -> List[Food]:
    result = await db.execute(select(Food).order_by(Food.id))
    return result.scalars().all()


@storage_boundary
async def create_food(
    db: AsyncSession,
    restaurant_id: int,
    name: str,
    price: Decimal,
    image: Optional[ImageUpload] = None,
) -> Food:
    await get_restaurant(db, restaurant_id)

    food = Food(name=name, price=price, restaurant_id=restaurant_id)
    if image is not None:
        food.image_data = image.data
        food.image_content_type = image.content_type

    db.add(food)
    await db.commit()
    return food


async def _top_by(db: AsyncSession, column, limit: int) -> List[Restaurant]:
    result = await db.execute(
        select(Restaurant).order_by(desc(column), Restaurant.id).limit(limit)
    )
    restaurants = result.scalars().all()
    if not restaurants:
        raise NotFoundError("Restaurant", message="No top restaurants found")
    return restaurants


@storage_boundary
async def top_rated(db: AsyncSession, limit: int = TOP_LIMIT) -> List[Restaurant]:
    """
    Топ ресторанов по рейтингу.
    """
    return await _top_by(db, Restaurant.rating, limit)


@storage_boundary
async def most_loved(db: AsyncSession, limit: int = TOP_LIMIT) -> List[Restaurant]:
    """
    Топ ресторанов по количеству лайков.
    """
    return await _top_by(db, Restaurant.love_count, limit)
