from datetime import datetime
from typing import Any, List, Optional

from .base import APIModel
from .category import CategoryRead


class UserCreate(APIModel):
    email: str
    password: str
    category_ids: Optional[List[int]] = None


class UserLogin(APIModel):
    email: str
    password: str


# Safe projection: never carries the password hash
class UserRead(APIModel):
    id: int
    email: str
    created_at: datetime
    categories: List[CategoryRead] = []


class RegisterResponse(APIModel):
    message: str
    user_id: int


class LoginResponse(APIModel):
    token: str
    user_id: int
    message: str


class CategoryIdsUpdate(APIModel):
    category_ids: Any = None
