from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.core.auth_dependencies import get_current_active_user
from app.core.config import settings
from app.core.constants import SECONDS_PER_MINUTE
from app.core.jwt_utils import create_access_token
from app.core.security import clear_access_cookie, hash_password, set_access_cookie, verify_password
from app.models import User
from app.repositories.repository_dependencies import get_user_repository
from app.repositories.user_repository import IUserRepository
from app.schemas.auth_schemas import Token, UserLogin, UserMembershipResponse, UserRegister, UserResponse

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(user_data: UserRegister, user_repo: IUserRepository = Depends(get_user_repository)):
    """
    Register a new user.
    :param user_data: New user data
    :param user_repo: User Repository instance
    :return: Created user object
    """

    if await user_repo.email_exists(user_data.email):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")

    if await user_repo.username_exists(user_data.username):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Username already taken")

    new_user = User(
        email=user_data.email,
        username=user_data.username,
        password_hash=hash_password(user_data.password),
    )

    return await user_repo.create(new_user)


@router.post("/login", response_model=Token)
async def login_user(
    response: Response,
    user_credentials: UserLogin,
    user_repo: IUserRepository = Depends(get_user_repository),
):
    """
    Login user, set the HttpOnly access cookie and return the token.
    :param response: FastAPI Response object for setting cookies
    :param user_credentials: User login credentials
    :param user_repo: User Repository instance
    :return: JWT token object
    """
    user = await user_repo.get_by_email(user_credentials.email)

    if not user or not verify_password(user_credentials.password, user.password_hash):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password")

    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User account is inactive")

    access_token = create_access_token(user.username)
    set_access_cookie(response, access_token)

    return {
        "access_token": access_token,
        "token_type": "bearer",
        "expires_in": settings.access_token_expire_minutes * SECONDS_PER_MINUTE,
    }


@router.post("/logout")
async def logout_user(
    response: Response,
    current_user: User = Depends(get_current_active_user),
):
    """
    Clear the access cookie.
    :param response: FastAPI Response object for clearing cookies
    :param current_user: Current authenticated user
    :return: Logout confirmation message
    """
    clear_access_cookie(response)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=UserMembershipResponse)
async def get_current_user_info(current_user: User = Depends(get_current_active_user)):
    """
    Get current user info.
    :param current_user: Current authenticated user
    :return: User information with joined room IDs
    """
    return current_user
