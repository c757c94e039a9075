"""
Доменные исключения и их отображение в HTTP-ответы.

Сервисный слой (crud) бросает наследников AppError, обработчик
в main.py превращает их в JSON вида {"message": "..."}.

    raise NotFoundError("Restaurant", restaurant_id)
    raise ConflictError("Email already in use")
"""

import functools
from typing import Any, Awaitable, Callable, TypeVar

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm.exc import StaleDataError

from food_delivery.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request data"


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid credentials"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, entity_id: Any = None, message: str | None = None):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(message or f"{entity} not found")


class ConflictError(AppError):
    # Клиенты исторически ждут 400 на дубликаты
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Conflicting request"


class InternalError(AppError):
    pass


def storage_boundary(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
    """
    Оборачивает публичную crud-операцию: ошибки хранилища -> доменные ошибки.
    Устаревшая версия строки (оптимистичная блокировка) -> ConflictError.
    """

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except StaleDataError as exc:
            logger.warning("Concurrent modification in %s: %s", func.__name__, exc)
            raise ConflictError("Resource was modified concurrently, retry the request") from exc
        except IntegrityError as exc:
            logger.warning("Integrity violation in %s: %s", func.__name__, exc.orig)
            raise ConflictError("Request conflicts with stored data") from exc
        except SQLAlchemyError as exc:
            logger.exception("Storage failure in %s", func.__name__)
            raise InternalError() from exc

    return wrapper


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content={"message": error.message})
