from typing import Optional

from sqlmodel import Field, SQLModel


# Join rows cascade away with their user/task; a category stays put while referenced
class UserCategoryLink(SQLModel, table=True):
    __tablename__ = "user_categories"

    user_id: Optional[int] = Field(
        default=None, foreign_key="users.id", primary_key=True, ondelete="CASCADE"
    )
    category_id: Optional[int] = Field(
        default=None, foreign_key="categories.id", primary_key=True, ondelete="RESTRICT"
    )


class CategoryTaskLink(SQLModel, table=True):
    __tablename__ = "category_tasks"

    category_id: Optional[int] = Field(
        default=None, foreign_key="categories.id", primary_key=True, ondelete="RESTRICT"
    )
    task_id: Optional[int] = Field(
        default=None, foreign_key="tasks.id", primary_key=True, ondelete="CASCADE"
    )
