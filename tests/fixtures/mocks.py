"""
Repository mocks for service unit tests.

Rooms and users are plain transient ORM objects, so relationship
collections behave like lists without a database.
"""

from datetime import timedelta
from unittest.mock import AsyncMock

from app.core.datetime_utils import utc_now
from app.models.room import Room
from app.models.user import User


def make_user(id: int, username: str) -> User:
    """Transient user with predictable email."""
    return User(id=id, username=username, email=f"{username.lower()}@example.com", is_active=True)


def make_room(
    id: int,
    creator: User,
    members: list[User] | None = None,
    start_offset: timedelta = timedelta(hours=0),
    duration: timedelta = timedelta(hours=24),
    version: int = 1,
) -> Room:
    """Transient room whose start is now + start_offset."""
    start = utc_now() + start_offset
    return Room(
        id=id,
        name=f"Room {id}",
        description="Mock room",
        start_date=start,
        end_date=start + duration,
        creator_id=creator.id,
        creator=creator,
        members=list(members or []),
        version=version,
    )


class MockRepositories:
    """Container for repository mocks; create/update echo their argument."""

    def __init__(self):
        self.room_repo = AsyncMock()
        self.user_repo = AsyncMock()

        self._setup_room_repo()
        self._setup_user_repo()

    def _setup_room_repo(self):
        async def _echo(room):
            if room.id is None:
                room.id = 1
            if room.version is None:
                room.version = 1
            return room

        self.room_repo.get_by_id.return_value = None
        self.room_repo.create.side_effect = _echo
        self.room_repo.update.side_effect = _echo
        self.room_repo.delete.return_value = True
        self.room_repo.get_active_rooms.return_value = []
        self.room_repo.get_by_creator.return_value = []
        self.room_repo.get_joined_by_user.return_value = []

    def _setup_user_repo(self):
        self.user_repo.get_by_username.return_value = None

    def with_room(self, room: Room) -> Room:
        """Make get_by_id return the given room."""
        self.room_repo.get_by_id.return_value = room
        return room
