from fastapi import APIRouter
from .endpoints import auth, categories, profile, tasks, users

router = APIRouter()

# Include all API endpoints
router.include_router(auth.router, prefix="/auth", tags=["authentication"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(profile.router, prefix="/profile", tags=["profile"])
router.include_router(categories.router, prefix="/categories", tags=["categories"])
router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
