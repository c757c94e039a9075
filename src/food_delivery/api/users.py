from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from food_delivery.crud.user import get_user, list_users, update_user
from food_delivery.db.session import get_async_session
from food_delivery.schemas.media import ImageUpload
from food_delivery.schemas.user import UserOut

router = APIRouter(prefix="/users", tags=["users"])


async def read_upload(upload: Optional[UploadFile]) -> Optional[ImageUpload]:
    """
    UploadFile -> байты + MIME. Пустой или отсутствующий файл -> None.
    """
    if upload is None:
        return None
    data = await upload.read()
    if not data:
        return None
    return ImageUpload(data=data, content_type=upload.content_type)


@router.get("", response_model=List[UserOut])
@router.get("/", response_model=List[UserOut], include_in_schema=False)
async def list_users_endpoint(db: AsyncSession = Depends(get_async_session)):
    users = await list_users(db)
    return [UserOut.from_orm_with_image(u) for u in users]


@router.get("/{user_id}", response_model=UserOut)
async def get_user_endpoint(user_id: int, db: AsyncSession = Depends(get_async_session)):
    user = await get_user(db, user_id)
    return UserOut.from_orm_with_image(user)


@router.put("/{user_id}", response_model=UserOut)
async def update_user_endpoint(
    user_id: int,
    name: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    location: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: AsyncSession = Depends(get_async_session),
):
    """
    Обновляет имя, телефон, адрес и (если передана) картинку профиля.
    """
    user = await update_user(
        db, user_id, name=name, phone=phone, location=location, image=await read_upload(image)
    )
    return UserOut.from_orm_with_image(user)
