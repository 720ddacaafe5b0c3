from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship, SQLModel

from .links import CategoryTaskLink

if TYPE_CHECKING:
    from .category import Category


class Task(SQLModel, table=True):
    __tablename__ = "tasks"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(nullable=False)

    categories: List["Category"] = Relationship(back_populates="tasks", link_model=CategoryTaskLink)
