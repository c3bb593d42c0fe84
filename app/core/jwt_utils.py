from datetime import datetime, timedelta, timezone

import jwt
from fastapi import HTTPException, status

from app.core.config import settings

ACCESS_TOKEN_TYPE = "access"


def _credentials_exception() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )


def create_access_token(username: str, expires_delta: timedelta | None = None) -> str:
    """
    Issue a signed access token for a user.
    :param username: Username stored as the token subject
    :param expires_delta: Lifetime, defaults to the configured access token lifetime
    :return: JWT token string
    """
    lifetime = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    payload = {
        "sub": username,
        "type": ACCESS_TOKEN_TYPE,
        "exp": datetime.now(timezone.utc) + lifetime,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def verify_token(token: str) -> dict:
    """
    Verify signature and expiry of a JWT token.
    :param token: JWT token string
    :return: Decoded payload
    """
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except jwt.InvalidTokenError:
        raise _credentials_exception()


def get_user_from_token(token: str) -> str:
    """
    Extract username from an access token.
    :param token: JWT token string
    :return: Username from token
    """
    payload = verify_token(token)
    username: str | None = payload.get("sub")

    if username is None or payload.get("type") != ACCESS_TOKEN_TYPE:
        raise _credentials_exception()

    return username
