from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from app.core.validators import SanitizedUsername


class UserRegister(BaseModel):
    """
    Schema for user registration.
    """

    email: EmailStr = Field(description="User email address")
    username: SanitizedUsername = Field(min_length=3, max_length=20, description="Username")
    password: str = Field(min_length=8, max_length=72, description="Password")


class UserLogin(BaseModel):
    """
    Schema for user login.
    """

    email: EmailStr = Field(description="User email address")
    password: str = Field(min_length=8, max_length=72, description="Password")


class Token(BaseModel):
    """
    JWT Token response.
    """

    access_token: str = Field(description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(description="Token lifetime in seconds")


class UserResponse(BaseModel):
    """
    User data response.
    """

    id: int
    email: EmailStr
    username: str
    is_active: bool
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class UserMembershipResponse(UserResponse):
    """
    User data including the rooms the user is a member of.
    """

    joined_room_ids: list[int] = Field(default_factory=list, description="IDs of rooms joined as a member")
