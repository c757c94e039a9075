from datetime import datetime

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from food_delivery.db.session import get_async_session
from food_delivery.exceptions import storage_boundary

router = APIRouter(tags=["health"])


@storage_boundary
async def ping_database(db: AsyncSession) -> None:
    await db.execute(text("SELECT 1"))


@router.get("/health", summary="Health check")
async def health_check(db: AsyncSession = Depends(get_async_session)):
    """
    Health-check: приложение отвечает и БД доступна.
    Недоступная БД -> 500 {"message": "Internal server error"}.
    """
    await ping_database(db)
    return {
        "status": "ok",
        "database": "ok",
        "timestamp": datetime.now(),
    }
