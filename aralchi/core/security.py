from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from passlib.context import CryptContext
from pydantic import BaseModel, Field, ValidationError

from .config import Settings

# Password hashing context, cost factor 10
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)


class TokenVerificationError(Exception):
    pass


class TokenPayload(BaseModel):
    user_id: Optional[int] = Field(default=None, alias="userId")
    exp: Optional[int] = None


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


# JWT token functions
def create_access_token(
    user_id: int, settings: Settings, expires_delta: Optional[timedelta] = None
) -> str:
    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {"userId": user_id, "iat": now, "exp": now + expires_delta}
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.ALGORITHM)


def verify_access_token(token: str, settings: Settings) -> TokenPayload:
    """Decode and check a token, raising TokenVerificationError on any failure."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.ALGORITHM])
        return TokenPayload.model_validate(payload)
    except jwt.exceptions.PyJWTError as exc:
        raise TokenVerificationError(str(exc)) from exc
    except ValidationError as exc:
        raise TokenVerificationError("Malformed token payload") from exc
