"""Seed demo users and rooms for local development (SEED_DEMO_DATA=true)."""

from datetime import timedelta

import structlog
from sqlalchemy import select

from app.core.config import settings
from app.core.database import AsyncSessionLocal
from app.core.datetime_utils import utc_now
from app.core.security import hash_password
from app.models.room import Room
from app.models.user import User
from app.services.interests_service import set_interests_for_room

logger = structlog.get_logger(__name__)

DEMO_USERS = [
    {"email": "alice@example.com", "username": "Alice", "password": "alice123"},
    {"email": "bob@example.com", "username": "Bob", "password": "bob12345"},
    {"email": "carol@example.com", "username": "Carol", "password": "carol123"},
]

DEMO_ROOMS = [
    {
        "name": "Coffee Chat",
        "description": "Casual conversations",
        "creator": "Alice",
        "interests": {"food": ["coffee"]},
    },
    {
        "name": "Board Game Night",
        "description": "Bring your favourite game",
        "creator": "Bob",
        "interests": {"games": ["board", "card"]},
    },
]


async def create_demo_users() -> list[dict]:
    """Create demo users that do not exist yet."""
    async with AsyncSessionLocal() as db:
        created_users = []
        for user_data in DEMO_USERS:
            result = await db.execute(select(User).where(User.email == user_data["email"]))
            if result.scalar_one_or_none():
                continue

            db.add(
                User(
                    email=user_data["email"],
                    username=user_data["username"],
                    password_hash=hash_password(user_data["password"]),
                )
            )
            created_users.append(user_data)

        if created_users:
            await db.commit()

    return created_users


async def create_demo_rooms(default_expiration: timedelta) -> list[dict]:
    """Create demo rooms owned by demo users, starting now."""
    async with AsyncSessionLocal() as db:
        created_rooms = []
        now = utc_now()
        for room_data in DEMO_ROOMS:
            result = await db.execute(select(Room).where(Room.name == room_data["name"]))
            if result.unique().scalar_one_or_none():
                continue

            result = await db.execute(select(User).where(User.username == room_data["creator"]))
            creator = result.scalar_one_or_none()
            if creator is None:
                continue

            room = Room(
                name=room_data["name"],
                description=room_data["description"],
                start_date=now,
                end_date=now + default_expiration,
                creator=creator,
            )
            set_interests_for_room(room_data["interests"], room)
            db.add(room)
            created_rooms.append(room_data)

        if created_rooms:
            await db.commit()

    return created_rooms


async def setup_demo_environment():
    """Create demo users and rooms for development"""
    created_users = await create_demo_users()
    created_rooms = await create_demo_rooms(timedelta(hours=settings.room_default_expiration_hours))

    for user in created_users:
        logger.info("demo_user_created", email=user["email"], username=user["username"])
    for room in created_rooms:
        logger.info("demo_room_created", name=room["name"], creator=room["creator"])
