from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.constants import (
    DEFAULT_ACCESS_TOKEN_EXPIRE_MINUTES,
    DEFAULT_COOKIE_SAMESITE,
    DEFAULT_COOKIE_SECURE,
    DEFAULT_JWT_ALGORITHM,
    DEFAULT_ROOM_EXPIRATION_HOURS,
)


class Settings(BaseSettings):
    """Application settings"""

    database_url: str

    secret_key: str
    algorithm: str = DEFAULT_JWT_ALGORITHM
    access_token_expire_minutes: int = DEFAULT_ACCESS_TOKEN_EXPIRE_MINUTES

    app_name: str = "Room Service"
    debug: bool = False

    # Room lifecycle
    room_default_expiration_hours: int = DEFAULT_ROOM_EXPIRATION_HOURS

    # Cookie Security Configuration
    cookie_domain: str | None = None
    cookie_secure: bool = DEFAULT_COOKIE_SECURE
    cookie_samesite: Literal["lax", "strict", "none"] = DEFAULT_COOKIE_SAMESITE

    # Development helpers
    seed_demo_data: bool = False
    reset_db: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")


settings = Settings()
