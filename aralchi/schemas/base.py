from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel


class APIModel(SQLModel):
    """Public JSON uses camelCase (userId, categoryIds, createdAt); either spelling is accepted."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
