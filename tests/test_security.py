from datetime import timedelta

import jwt
import pytest

from aralchi.core.config import Settings
from aralchi.core.security import (
    TokenVerificationError,
    create_access_token,
    get_password_hash,
    verify_password,
    verify_access_token,
)


@pytest.fixture
def settings():
    return Settings(JWT_SECRET="unit-secret-with-at-least-32-bytes!!")


def test_password_hash_round_trip():
    hashed = get_password_hash("hunter2")
    assert hashed != "hunter2"
    assert verify_password("hunter2", hashed)
    assert not verify_password("hunter3", hashed)


def test_password_hash_is_salted():
    assert get_password_hash("same") != get_password_hash("same")


def test_verify_access_token_returns_user_id(settings):
    token = create_access_token(7, settings)
    assert verify_access_token(token, settings).user_id == 7


def test_verify_access_token_rejects_expired(settings):
    token = create_access_token(7, settings, expires_delta=timedelta(minutes=-1))
    with pytest.raises(TokenVerificationError):
        verify_access_token(token, settings)


def test_verify_access_token_rejects_wrong_secret(settings):
    token = create_access_token(7, Settings(JWT_SECRET="someone-else-with-at-least-32-bytes!"))
    with pytest.raises(TokenVerificationError):
        verify_access_token(token, settings)


def test_verify_access_token_rejects_non_integer_user_id(settings):
    token = jwt.encode({"userId": "abc"}, settings.JWT_SECRET, algorithm=settings.ALGORITHM)
    with pytest.raises(TokenVerificationError):
        verify_access_token(token, settings)
