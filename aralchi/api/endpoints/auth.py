import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from aralchi.core.config import Settings
from aralchi.core.errors import UnknownCategoryError
from aralchi.core.security import create_access_token, get_password_hash, verify_password
from aralchi.db.session import get_session
from aralchi.models import User
from aralchi.schemas.user import LoginResponse, RegisterResponse, UserCreate, UserLogin
from aralchi.services.categories import resolve_categories
from ..deps import get_settings

logger = logging.getLogger(__name__)

router = APIRouter()

EMAIL_TAKEN = "A user with this email already exists."
INVALID_CREDENTIALS = "Invalid email or password."


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(user_create: UserCreate, session: Session = Depends(get_session)):
    # Check if user exists
    user = session.exec(select(User).where(User.email == user_create.email)).first()
    if user:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=EMAIL_TAKEN)

    try:
        categories = resolve_categories(session, user_create.category_ids or [])
    except UnknownCategoryError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown category IDs: {exc.missing_ids}",
        )

    db_user = User(
        email=user_create.email,
        password_hash=get_password_hash(user_create.password),
        categories=categories,
    )
    session.add(db_user)
    try:
        session.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration for the same email
        session.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=EMAIL_TAKEN)
    session.refresh(db_user)

    logger.info("Registered user %s", db_user.id)
    return RegisterResponse(message="User created successfully!", user_id=db_user.id)


@router.post("/login", response_model=LoginResponse)
def login(
    user_credentials: UserLogin,
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
):
    # Find user by email
    statement = select(User).where(User.email == user_credentials.email)
    user = session.exec(statement).first()

    # Same answer for an unknown email and a wrong password
    if not user or not verify_password(user_credentials.password, user.password_hash):
        logger.info("Failed login attempt")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)

    token = create_access_token(user.id, settings)
    logger.info("User %s logged in", user.id)
    return LoginResponse(token=token, user_id=user.id, message="Login successful!")
