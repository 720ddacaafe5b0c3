import logging
from typing import Iterable, List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from ..core.errors import CategoryInUseError, CategoryNotFoundError, UnknownCategoryError
from ..models import Category, CategoryTaskLink, User, UserCategoryLink

logger = logging.getLogger(__name__)


def resolve_categories(session: Session, category_ids: Iterable[int]) -> List[Category]:
    """Load every requested category, failing if any id is unknown."""
    wanted = set(category_ids)
    if not wanted:
        return []

    categories = session.exec(select(Category).where(Category.id.in_(wanted))).all()
    missing = wanted - {category.id for category in categories}
    if missing:
        raise UnknownCategoryError(missing)
    return sorted(categories, key=lambda category: category.id)


def set_user_categories(session: Session, user: User, category_ids: Iterable[int]) -> User:
    """Replace the user's categories with exactly ``category_ids``.

    The current join rows are diffed against the requested set; stale rows are
    removed before new ones are inserted and the whole change is committed once.
    """
    wanted = {category.id for category in resolve_categories(session, category_ids)}

    links = session.exec(
        select(UserCategoryLink).where(UserCategoryLink.user_id == user.id)
    ).all()
    current = {link.category_id for link in links}

    try:
        for link in links:
            if link.category_id not in wanted:
                session.delete(link)
        session.flush()

        for category_id in sorted(wanted - current):
            session.add(UserCategoryLink(user_id=user.id, category_id=category_id))
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        raise

    logger.info(
        "User %s categories set to %s (removed %d, added %d)",
        user.id, sorted(wanted), len(current - wanted), len(wanted - current),
    )
    session.refresh(user)
    return user


def is_category_in_use(session: Session, category_id: int) -> bool:
    user_link = session.exec(
        select(UserCategoryLink).where(UserCategoryLink.category_id == category_id).limit(1)
    ).first()
    if user_link is not None:
        return True

    task_link = session.exec(
        select(CategoryTaskLink).where(CategoryTaskLink.category_id == category_id).limit(1)
    ).first()
    return task_link is not None


def delete_category(session: Session, category_id: int) -> None:
    category = session.get(Category, category_id)
    if category is None:
        raise CategoryNotFoundError(category_id)
    if is_category_in_use(session, category_id):
        raise CategoryInUseError(category_id)

    session.delete(category)
    try:
        session.commit()
    except IntegrityError as exc:
        # A join row appeared after the check; the RESTRICT constraint caught it
        session.rollback()
        raise CategoryInUseError(category_id) from exc

    logger.info("Deleted category %s", category_id)
