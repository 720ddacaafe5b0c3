import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from aralchi.core.errors import UnknownCategoryError
from aralchi.core.security import TokenPayload
from aralchi.db.session import get_session
from aralchi.models import User
from aralchi.schemas.user import CategoryIdsUpdate, UserRead
from aralchi.services.categories import set_user_categories
from ..deps import get_token_payload, require_category_ids, require_user_id

logger = logging.getLogger(__name__)

router = APIRouter()


def _user_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.")


@router.get("", response_model=UserRead)
def get_profile(
    payload: TokenPayload = Depends(get_token_payload),
    session: Session = Depends(get_session),
):
    user_id = require_user_id(payload)
    try:
        user = session.get(User, user_id)
        if user is None:
            raise _user_not_found()
        return UserRead.model_validate(user)
    except SQLAlchemyError:
        logger.exception("Failed to load profile for user %s", user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error.",
        )


@router.post("/categories", response_model=UserRead)
def update_profile_categories(
    update: CategoryIdsUpdate,
    payload: TokenPayload = Depends(get_token_payload),
    session: Session = Depends(get_session),
):
    user_id = require_user_id(payload)
    category_ids = require_category_ids(update.category_ids)

    user = session.get(User, user_id)
    if user is None:
        raise _user_not_found()

    try:
        user = set_user_categories(session, user, category_ids)
        return UserRead.model_validate(user)
    except UnknownCategoryError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown category IDs: {exc.missing_ids}",
        )
    except SQLAlchemyError:
        logger.exception("Failed to update categories for user %s", user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not update the user's categories.",
        )
