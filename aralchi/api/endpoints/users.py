import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload
from sqlmodel import Session, select

from aralchi.db.session import get_session
from aralchi.models import User
from aralchi.schemas.user import UserRead

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[UserRead])
def list_users(session: Session = Depends(get_session)):
    try:
        users = session.exec(
            select(User).options(selectinload(User.categories)).order_by(User.id)
        ).all()
        return [UserRead.model_validate(user) for user in users]
    except SQLAlchemyError:
        logger.exception("Failed to list users")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not fetch the list of users.",
        )
