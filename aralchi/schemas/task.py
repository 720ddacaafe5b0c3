from typing import Any, List

from .base import APIModel
from .category import CategoryRead


class TaskCreate(APIModel):
    title: str
    # Shape is checked by the endpoint so it can answer with its own message
    category_ids: Any = None


class TaskRead(APIModel):
    id: int
    title: str
    categories: List[CategoryRead] = []
