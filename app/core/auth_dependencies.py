import structlog
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.constants import ACCESS_TOKEN_COOKIE_NAME
from app.core.jwt_utils import get_user_from_token
from app.models.user import User
from app.repositories.repository_dependencies import get_user_repository
from app.repositories.user_repository import IUserRepository

logger = structlog.get_logger(__name__)

security = HTTPBearer(auto_error=False)


def get_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> str:
    """
    Extract JWT token from the HttpOnly cookie, falling back to the
    Authorization header (Swagger UI, curl, non-browser clients).
    :param request: FastAPI Request object for reading cookies
    :param credentials: HTTP authorization credentials (optional fallback)
    :return: JWT token string
    """
    token = request.cookies.get(ACCESS_TOKEN_COOKIE_NAME)
    if token:
        return token

    if credentials:
        logger.debug("header_auth_used", path=request.url.path)
        return credentials.credentials

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Authentication required. Use POST /api/v1/auth/login to obtain a token.",
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    token: str = Depends(get_token),
    user_repo: IUserRepository = Depends(get_user_repository),
) -> User:
    """
    Resolve the caller from the access token.
    :param token: JWT token string
    :param user_repo: User repository instance
    :return: Current user object, joined rooms loaded
    """
    username = get_user_from_token(token)

    user = await user_repo.get_by_username(username)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"User '{username}' not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user


def get_current_active_user(
    current_user: User = Depends(get_current_user),
) -> User:
    """
    Reject deactivated accounts.
    :param current_user: Current user from token
    :return: Active user object
    """
    if not current_user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User account is inactive",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return current_user
