"""
Factories for persisting test users and rooms.

build() returns a transient object, create() adds it to the session,
commits and returns it reloaded with the relationships the API reads.
"""

from datetime import datetime, timedelta
from itertools import count

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.datetime_utils import utc_now
from app.core.jwt_utils import create_access_token
from app.core.security import hash_password
from app.models.room import Room
from app.models.user import User
from app.services.interests_service import set_interests_for_room

_sequence = count(1)

DEFAULT_PASSWORD = "password123"


class UserFactory:
    """Create users with unique usernames and emails."""

    @staticmethod
    def build(
        username: str | None = None,
        email: str | None = None,
        password: str = DEFAULT_PASSWORD,
        is_active: bool = True,
    ) -> User:
        n = next(_sequence)
        username = username or f"user{n}"
        return User(
            username=username,
            email=email or f"{username.lower()}@example.com",
            password_hash=hash_password(password),
            is_active=is_active,
        )

    @classmethod
    async def create(cls, db: AsyncSession, **kwargs) -> User:
        user = cls.build(**kwargs)
        db.add(user)
        await db.commit()
        result = await db.execute(
            select(User).options(selectinload(User.joined_rooms)).where(User.id == user.id)
        )
        return result.scalar_one()


class RoomFactory:
    """Create rooms owned by a given creator."""

    @staticmethod
    def build(
        creator: User,
        name: str | None = None,
        description: str | None = "Factory room",
        start_date: datetime | None = None,
        end_date: datetime | None = None,
        interests: dict[str, list[str]] | None = None,
        members: list[User] | None = None,
    ) -> Room:
        start = start_date or utc_now()
        room = Room(
            name=name or f"Room {next(_sequence)}",
            description=description,
            start_date=start,
            end_date=end_date or start + timedelta(hours=24),
            creator=creator,
            members=list(members or []),
        )
        set_interests_for_room(interests or {}, room)
        return room

    @classmethod
    async def create(cls, db: AsyncSession, creator: User, **kwargs) -> Room:
        room = cls.build(creator, **kwargs)
        db.add(room)
        await db.commit()
        await db.refresh(room)
        return room


def auth_headers_for(username: str) -> dict[str, str]:
    """Bearer header for a username."""
    return {"Authorization": f"Bearer {create_access_token(username)}"}
