from .base import APIModel


class CategoryCreate(APIModel):
    name: str


class CategoryRead(APIModel):
    id: int
    name: str
