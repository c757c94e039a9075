from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from food_delivery.api.users import read_upload
from food_delivery.crud.user import UserProfile, authenticate, create_account
from food_delivery.db.session import get_async_session
from food_delivery.models import RoleEnum
from food_delivery.schemas.user import SigninRequest, SigninResult, SignupResult, UserOut

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=SignupResult)
async def signup(
    name: str = Form(..., min_length=1),
    email: str = Form(..., min_length=3),
    password: str = Form(..., min_length=6, max_length=72),
    phone: Optional[str] = Form(None),
    location: Optional[str] = Form(None),
    role: str = Form(RoleEnum.customer.value),
    restaurant_id: Optional[int] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: AsyncSession = Depends(get_async_session),
):
    """
    Регистрация: анкета + картинка профиля (обязательна).
    Возвращает аккаунт и токен.
    """
    profile = UserProfile(
        name=name,
        email=email,
        password=password,
        phone=phone,
        location=location,
        role=role,
        restaurant_id=restaurant_id,
    )
    user, token = await create_account(db, profile, await read_upload(image))
    return SignupResult(**UserOut.from_orm_with_image(user).model_dump(), token=token)


@router.post("/signin", response_model=SigninResult)
async def signin(credentials: SigninRequest, db: AsyncSession = Depends(get_async_session)):
    return await authenticate(db, credentials.email, credentials.password)
