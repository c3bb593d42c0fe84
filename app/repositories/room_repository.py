from abc import abstractmethod
from datetime import datetime

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from app.core.exceptions import RoomVersionConflictException
from app.models.room import Room, room_members

from .base_repository import BaseRepository

logger = structlog.get_logger(__name__)


class IRoomRepository(BaseRepository[Room]):
    """Abstract interface for Room repository."""

    @abstractmethod
    async def get_active_rooms(self, now: datetime) -> list[Room]:
        """Get rooms that have not ended yet."""
        pass

    @abstractmethod
    async def get_by_creator(self, creator_id: int) -> list[Room]:
        """Get rooms created by a user."""
        pass

    @abstractmethod
    async def get_joined_by_user(self, user_id: int) -> list[Room]:
        """Get rooms a user is a member of."""
        pass

    @abstractmethod
    async def delete(self, id: int) -> bool:
        """
        Delete room by ID.
        :param id: Room ID to delete
        :return: True if deleted, False if not found
        """
        pass


class RoomRepository(IRoomRepository):
    """SQLAlchemy implementation of Room repository."""

    def __init__(self, db: AsyncSession):
        super().__init__(db)

    async def get_by_id(self, id: int) -> Room | None:
        query = select(Room).where(Room.id == id)
        result = await self.db.execute(query)
        return result.unique().scalar_one_or_none()

    async def get_active_rooms(self, now: datetime) -> list[Room]:
        query = select(Room).where(Room.end_date > now).order_by(Room.start_date, Room.id)
        result = await self.db.execute(query)
        return list(result.unique().scalars().all())

    async def get_by_creator(self, creator_id: int) -> list[Room]:
        query = select(Room).where(Room.creator_id == creator_id).order_by(Room.start_date, Room.id)
        result = await self.db.execute(query)
        return list(result.unique().scalars().all())

    async def get_joined_by_user(self, user_id: int) -> list[Room]:
        query = (
            select(Room)
            .join(room_members, room_members.c.room_id == Room.id)
            .where(room_members.c.user_id == user_id)
            .order_by(Room.start_date, Room.id)
        )
        result = await self.db.execute(query)
        return list(result.unique().scalars().all())

    async def create(self, room: Room) -> Room:
        self.db.add(room)
        await self.db.commit()
        await self.db.refresh(room)
        return room

    async def update(self, room: Room) -> Room:
        """
        Commit pending changes of a room.
        Raises RoomVersionConflictException if another request saved it first.
        """
        room_id = room.id
        try:
            await self.db.commit()
        except StaleDataError:
            await self.db.rollback()
            logger.warning("room_version_conflict", room_id=room_id)
            raise RoomVersionConflictException(room_id)
        await self.db.refresh(room)
        return room

    async def delete(self, id: int) -> bool:
        """Hard delete room by ID, membership and interests rows go with it."""
        room = await self.get_by_id(id)
        if not room:
            return False
        try:
            await self.db.delete(room)
            await self.db.commit()
        except StaleDataError:
            await self.db.rollback()
            logger.warning("room_version_conflict", room_id=id)
            raise RoomVersionConflictException(id)
        return True
