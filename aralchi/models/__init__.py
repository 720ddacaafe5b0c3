# This file ensures all models are loaded together to resolve circular references
from .links import CategoryTaskLink, UserCategoryLink
from .category import Category
from .user import User
from .task import Task

__all__ = ["User", "Category", "Task", "UserCategoryLink", "CategoryTaskLink"]
