from fastapi import Response
from passlib.context import CryptContext

from app.core.config import settings
from app.core.constants import ACCESS_TOKEN_COOKIE_NAME, SECONDS_PER_MINUTE

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt.
    :param password: Plain text password
    :return: Hashed password
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check a login attempt against a stored hash.
    :param plain_password: Plain text password
    :param hashed_password: Stored bcrypt hash
    :return: True if password matches, else False.
    """
    return pwd_context.verify(plain_password, hashed_password)


def set_access_cookie(response: Response, access_token: str) -> None:
    """
    Attach the access token as an HttpOnly cookie.
    :param response: Outgoing response
    :param access_token: Signed JWT
    """
    response.set_cookie(
        key=ACCESS_TOKEN_COOKIE_NAME,
        value=access_token,
        httponly=True,
        max_age=settings.access_token_expire_minutes * SECONDS_PER_MINUTE,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
        domain=settings.cookie_domain,
        path="/",
    )


def clear_access_cookie(response: Response) -> None:
    """Remove the access token cookie."""
    response.delete_cookie(key=ACCESS_TOKEN_COOKIE_NAME, domain=settings.cookie_domain, path="/")
