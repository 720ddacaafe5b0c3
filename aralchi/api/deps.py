import logging
from typing import Any, List, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from aralchi.core.config import Settings
from aralchi.core.errors import AuthRejected
from aralchi.core.security import TokenPayload, TokenVerificationError, verify_access_token

logger = logging.getLogger(__name__)

# Missing credentials are answered by get_token_payload, not by HTTPBearer
security = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_payload(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    settings: Settings = Depends(get_settings),
) -> TokenPayload:
    if credentials is None:
        raise AuthRejected(status.HTTP_401_UNAUTHORIZED)

    try:
        payload = verify_access_token(credentials.credentials, settings)
    except TokenVerificationError as exc:
        logger.debug("Rejected bearer token: %s", exc)
        raise AuthRejected(status.HTTP_403_FORBIDDEN)

    request.state.user_id = payload.user_id
    return payload


def require_user_id(payload: TokenPayload) -> int:
    if not payload.user_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User ID not found in token.",
        )
    return payload.user_id


def require_category_ids(value: Any) -> List[int]:
    if not isinstance(value, list):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="categoryIds must be an array.",
        )
    if not all(isinstance(item, int) and not isinstance(item, bool) for item in value):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="categoryIds must contain only integer IDs.",
        )
    return value


def parse_path_id(value: str) -> Optional[int]:
    """Path ids that are not integers cannot match a row; callers answer 404."""
    try:
        return int(value)
    except ValueError:
        return None
