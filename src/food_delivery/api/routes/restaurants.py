from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from food_delivery.api.users import read_upload
from food_delivery.crud.order import list_orders_for_restaurant
from food_delivery.crud.restaurant import (
    TOP_LIMIT,
    create_food,
    create_restaurant,
    get_restaurant,
    list_all_foods,
    list_foods_for,
    list_restaurants,
    most_loved,
    top_rated,
)
from food_delivery.db.session import get_async_session
from food_delivery.schemas.food import FoodOut
from food_delivery.schemas.order import OrderWithFoods
from food_delivery.schemas.restaurant import RestaurantCreate, RestaurantDetail, RestaurantOut

router = APIRouter(tags=["restaurants"])


@router.post("/restaurants", response_model=RestaurantOut, status_code=status.HTTP_201_CREATED)
async def create_restaurant_endpoint(
    name: str = Form(..., min_length=1),
    delivery_price: Optional[Decimal] = Form(None),
    delivery_time: Optional[str] = Form(None),
    percent_for_app: Optional[float] = Form(None),
    type: Optional[str] = Form(None),
    address: Optional[str] = Form(None),
    cuisine_type: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    phone_number: Optional[str] = Form(None),
    rating: float = Form(0),
    rating_count: int = Form(0),
    rating_number: Optional[float] = Form(None),
    love_count: int = Form(0),
    start_time: Optional[str] = Form(None),
    end_time: Optional[str] = Form(None),
    user_type: Optional[str] = Form(None),
    active: bool = Form(True),
    image: Optional[UploadFile] = File(None),
    ad_image: Optional[UploadFile] = File(None),
    db: AsyncSession = Depends(get_async_session),
):
    """
    Создаёт ресторан. Картинка и рекламная картинка необязательны.
    """
    restaurant_in = RestaurantCreate(
        name=name,
        delivery_price=delivery_price,
        delivery_time=delivery_time,
        percent_for_app=percent_for_app,
        type=type,
        address=address,
        cuisine_type=cuisine_type,
        description=description,
        phone_number=phone_number,
        rating=rating,
        rating_count=rating_count,
        rating_number=rating_number,
        love_count=love_count,
        start_time=start_time,
        end_time=end_time,
        user_type=user_type,
        active=active,
    )
    restaurant = await create_restaurant(
        db, restaurant_in, image=await read_upload(image), ad_image=await read_upload(ad_image)
    )
    return RestaurantOut.from_orm_with_image(restaurant)


@router.get("/restaurants", response_model=List[RestaurantOut])
async def list_restaurants_endpoint(db: AsyncSession = Depends(get_async_session)):
    restaurants = await list_restaurants(db)
    return [RestaurantOut.from_orm_with_image(r) for r in restaurants]


@router.get("/restaurants/{restaurant_id}", response_model=RestaurantDetail)
async def get_restaurant_endpoint(restaurant_id: int, db: AsyncSession = Depends(get_async_session)):
    """
    Ресторан вместе с его заказами.
    """
    restaurant = await get_restaurant(db, restaurant_id, with_orders=True)
    return RestaurantDetail.from_orm_with_orders(restaurant)


@router.get("/restaurants/{restaurant_id}/foods", response_model=List[FoodOut])
async def list_restaurant_foods(restaurant_id: int, db: AsyncSession = Depends(get_async_session)):
    foods = await list_foods_for(db, restaurant_id)
    return [FoodOut.from_orm_with_image(f) for f in foods]


@router.post(
    "/restaurants/{restaurant_id}/foods",
    response_model=FoodOut,
    status_code=status.HTTP_201_CREATED,
)
async def create_food_endpoint(
    restaurant_id: int,
    name: str = Form(..., min_length=1),
    price: Decimal = Form(..., ge=0),
    image: Optional[UploadFile] = File(None),
    db: AsyncSession = Depends(get_async_session),
):
    food = await create_food(db, restaurant_id, name, price, image=await read_upload(image))
    return FoodOut.from_orm_with_image(food)


@router.get("/restaurants/{restaurant_id}/orders", response_model=List[OrderWithFoods])
async def list_restaurant_orders(restaurant_id: int, db: AsyncSession = Depends(get_async_session)):
    orders = await list_orders_for_restaurant(db, restaurant_id)
    return [OrderWithFoods.from_orm_with_foods(o) for o in orders]


@router.get("/top", response_model=List[RestaurantOut])
async def top_restaurants(
    limit: int = Query(TOP_LIMIT, ge=1, le=100, description="Сколько ресторанов вернуть"),
    db: AsyncSession = Depends(get_async_session),
):
    """
    Топ ресторанов по рейтингу.
    """
    restaurants = await top_rated(db, limit)
    return [RestaurantOut.from_orm_with_image(r) for r in restaurants]


@router.get("/popular", response_model=List[RestaurantOut])
async def popular_restaurants(
    limit: int = Query(TOP_LIMIT, ge=1, le=100, description="Сколько ресторанов вернуть"),
    db: AsyncSession = Depends(get_async_session),
):
    """
    Топ ресторанов по количеству лайков.
    """
    restaurants = await most_loved(db, limit)
    return [RestaurantOut.from_orm_with_image(r) for r in restaurants]


@router.get("/foods", response_model=List[FoodOut], tags=["foods"])
async def list_foods(db: AsyncSession = Depends(get_async_session)):
    foods = await list_all_foods(db)
    return [FoodOut.from_orm_with_image(f) for f in foods]
