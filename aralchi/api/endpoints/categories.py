import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from aralchi.core.errors import CategoryInUseError, CategoryNotFoundError
from aralchi.db.session import get_session
from aralchi.models import Category
from aralchi.schemas.category import CategoryCreate, CategoryRead
from aralchi.services.categories import delete_category
from ..deps import parse_path_id

logger = logging.getLogger(__name__)

router = APIRouter()

DELETE_FAILED = "Could not delete the category. Make sure it exists and is not in use."


@router.get("", response_model=List[CategoryRead])
def list_categories(session: Session = Depends(get_session)):
    categories = session.exec(select(Category).order_by(Category.id)).all()
    return [CategoryRead.model_validate(category) for category in categories]


@router.post("", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
def create_category(category_create: CategoryCreate, session: Session = Depends(get_session)):
    db_category = Category(name=category_create.name)
    session.add(db_category)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="A category with this name already exists.",
        )
    session.refresh(db_category)

    logger.info("Created category %s (%s)", db_category.id, db_category.name)
    return CategoryRead.model_validate(db_category)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_category(category_id: str, session: Session = Depends(get_session)):
    parsed_id = parse_path_id(category_id)
    if parsed_id is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=DELETE_FAILED)

    try:
        delete_category(session, parsed_id)
    except (CategoryNotFoundError, CategoryInUseError) as exc:
        logger.info("Refused to delete category %s: %s", parsed_id, type(exc).__name__)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=DELETE_FAILED)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
