from datetime import datetime
from typing import Optional

from pydantic import BaseModel, constr

from .media import ImageOut


class UserOut(BaseModel):
    id: int
    name: str
    phone: Optional[str] = None
    location: Optional[str] = None
    email: str
    role: str
    restaurant_id: Optional[int] = None
    image: Optional[ImageOut] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_orm_with_image(cls, user):
        return cls(
            id=user.id,
            name=user.name,
            phone=user.phone,
            location=user.location,
            email=user.email,
            role=user.role,
            restaurant_id=user.restaurant_id,
            image=ImageOut.from_blob(user.image_data, user.image_content_type),
            created_at=user.created_at,
        )


class UserBrief(BaseModel):
    id: int
    name: str
    phone: Optional[str] = None
    location: Optional[str] = None
    email: str

    class Config:
        from_attributes = True


class SignupResult(UserOut):
    token: str


class SigninRequest(BaseModel):
    email: constr(min_length=1)
    password: constr(min_length=1)


class SigninResult(BaseModel):
    user_id: int
    token: str
    role: str
    restaurant_id: Optional[int] = None
