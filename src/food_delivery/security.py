"""
Хэширование паролей (bcrypt) и bearer-токены (JWT).
"""

from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from food_delivery.config import settings
from food_delivery.exceptions import UnauthorizedError, ValidationError

# bcrypt учитывает только первые 72 байта
MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    """
    Солёный bcrypt-хэш. Строка содержит соль и стоимость.
    """
    encoded = password.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(encoded, salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    if not hashed_password or not hashed_password.startswith(("$2a$", "$2b$", "$2y$")):
        return False
    encoded = plain_password.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(encoded, hashed_password.encode("utf-8"))


def create_access_token(user_id: int, expires_minutes: int | None = None) -> str:
    """
    Подписанный токен с id аккаунта в sub.
    """
    now = datetime.now(timezone.utc)
    ttl = expires_minutes if expires_minutes is not None else settings.ACCESS_TOKEN_EXPIRE_MINUTES
    payload = {
        "sub": str(user_id),
        "iat": now,
        "exp": now + timedelta(minutes=ttl),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> int:
    """
    Возвращает id аккаунта из токена.
    Просроченный, битый или чужой токен -> UnauthorizedError.
    """
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError as exc:
        raise UnauthorizedError("Token expired") from exc
    except jwt.InvalidTokenError as exc:
        raise UnauthorizedError("Invalid token") from exc

    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError) as exc:
        raise UnauthorizedError("Invalid token") from exc
