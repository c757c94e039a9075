from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from .api import health, users
from food_delivery.api.routes.auth import router as auth_router
from food_delivery.api.routes.cart import router as cart_router
from food_delivery.api.routes.orders import router as orders_router
from food_delivery.api.routes.restaurants import router as restaurants_router
from food_delivery.config import settings
from food_delivery.db.session import create_db_and_tables
from food_delivery.exceptions import (
    AppError,
    app_error_handler,
    request_validation_error_handler,
    unhandled_error_handler,
)
from food_delivery.logging_config import get_logger, setup_logging

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.AUTO_CREATE_TABLES:
        await create_db_and_tables()
        logger.info("Database tables created")
    logger.info("Application started")
    yield
    logger.info("Application stopped")


app = FastAPI(title="Food Delivery API", lifespan=lifespan)

app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)

# Подключаем роуты
app.include_router(health.router)
app.include_router(auth_router)
app.include_router(users.router)
app.include_router(cart_router)
app.include_router(restaurants_router)
app.include_router(orders_router)
