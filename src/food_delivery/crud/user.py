from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from food_delivery.exceptions import (
    ConflictError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
    storage_boundary,
)
from food_delivery.logging_config import get_logger
from food_delivery.models import Restaurant, RoleEnum, User
from food_delivery.schemas.media import ImageUpload
from food_delivery.security import create_access_token, hash_password, verify_password

logger = get_logger(__name__)


@dataclass
class UserProfile:
    name: str
    email: str
    password: str
    phone: Optional[str] = None
    location: Optional[str] = None
    role: str = RoleEnum.customer.value
    restaurant_id: Optional[int] = None


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalars().first()


@storage_boundary
async def create_account(
    db: AsyncSession, profile: UserProfile, image: Optional[ImageUpload]
) -> tuple[User, str]:
    """
    Регистрирует аккаунт и выдаёт токен.
    Порядок проверок: дубликат email, затем наличие картинки.
    """
    if await get_user_by_email(db, profile.email):
        raise ConflictError("Email already in use")

    if image is None or not image.data:
        raise ValidationError("No file uploaded")

    if profile.restaurant_id is not None and not await db.get(Restaurant, profile.restaurant_id):
        raise ValidationError(f"Restaurant with id={profile.restaurant_id} does not exist")

    user = User(
        name=profile.name,
        email=profile.email,
        password_hash=hash_password(profile.password),
        phone=profile.phone,
        location=profile.location,
        role=profile.role,
        restaurant_id=profile.restaurant_id,
        image_data=image.data,
        image_content_type=image.content_type,
    )
    db.add(user)
    await db.commit()

    user = await get_user(db, user.id)
    logger.info("Account created: user_id=%s role=%s", user.id, user.role)
    return user, create_access_token(user.id)


@storage_boundary
async def authenticate(db: AsyncSession, email: str, password: str) -> dict:
    """
    Проверка пароля по bcrypt-хэшу.
    Неизвестный email и неверный пароль неразличимы для клиента.
    """
    user = await get_user_by_email(db, email)
    if not user or not verify_password(password, user.password_hash):
        logger.info("Failed sign-in attempt")
        raise UnauthorizedError("Invalid credentials")

    return {
        "user_id": user.id,
        "token": create_access_token(user.id),
        "role": user.role,
        "restaurant_id": user.restaurant_id,
    }


@storage_boundary
async def list_users(db: AsyncSession) -> List[User]:
    result = await db.execute(select(User).order_by(User.id))
    return result.scalars().all()


@storage_boundary
async def get_user(db: AsyncSession, user_id: int) -> User:
    result = await db.execute(
        select(User).where(User.id == user_id).execution_options(populate_existing=True)
    )
    user = result.scalars().first()
    if not user:
        raise NotFoundError("User", user_id)
    return user


@storage_boundary
async def update_user(
    db: AsyncSession,
    user_id: int,
    name: Optional[str] = None,
    phone: Optional[str] = None,
    location: Optional[str] = None,
    image: Optional[ImageUpload] = None,
) -> User:
    """
    Обновляет профиль. Картинка заменяется, только если передана.
    """
    user = await get_user(db, user_id)

    for key, value in {"name": name, "phone": phone, "location": location}.items():
        if value is not None:
            setattr(user, key, value)

    if image is not None and image.data:
        user.image_data = image.data
        user.image_content_type = image.content_type

    await db.commit()
    return user
