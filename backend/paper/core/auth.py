"""
Bearer JWT authentication.

Tokens are issued elsewhere; this module only validates them and yields
the authenticated user id. create_access_token exists for tooling and tests.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import JWT_SECRET_KEY, JWT_ALGORITHM
from .logging_config import get_logger

logger = get_logger(__name__)

# auto_error=False so a missing header gets the same 401 as a bad token
bearer_scheme = HTTPBearer(bearerFormat="JWT", auto_error=False)


def create_access_token(
    user_id: str,
    expires_delta: Optional[timedelta] = None,
    secret_key: str = JWT_SECRET_KEY,
    algorithm: str = JWT_ALGORITHM
) -> str:
    """Sign a token carrying user_id in the "sub" claim."""
    if expires_delta is None:
        expires_delta = timedelta(hours=1)
    payload = {
        "sub": str(user_id),
        "exp": datetime.now(timezone.utc) + expires_delta
    }
    return jwt.encode(payload, secret_key, algorithm=algorithm)


def decode_user_id(token: str) -> str:
    """
    Validate a token and return its user id.

    Raises:
        HTTPException: 401 if the token is invalid, expired or carries no user id
    """
    try:
        payload = jwt.decode(token, JWT_SECRET_KEY, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token expired",
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc
    except jwt.InvalidTokenError as exc:
        logger.info(f"Rejected invalid token: {exc}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc

    user_id = payload.get("sub") or payload.get("user_id")
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing user id in token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return str(user_id)


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> str:
    """FastAPI dependency: Authorization: Bearer <token> -> user id."""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authorization header",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return decode_user_id(credentials.credentials)
