from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship, SQLModel

from .links import CategoryTaskLink, UserCategoryLink

if TYPE_CHECKING:
    from .task import Task
    from .user import User


class Category(SQLModel, table=True):
    __tablename__ = "categories"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True, index=True, nullable=False)

    # Join rows are left to the database so its RESTRICT rule decides the delete
    users: List["User"] = Relationship(
        back_populates="categories",
        link_model=UserCategoryLink,
        sa_relationship_kwargs={"passive_deletes": "all"},
    )
    tasks: List["Task"] = Relationship(
        back_populates="categories",
        link_model=CategoryTaskLink,
        sa_relationship_kwargs={"passive_deletes": "all"},
    )
