from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.repositories.room_repository import IRoomRepository, RoomRepository
from app.repositories.user_repository import IUserRepository, UserRepository


def get_user_repository(db: AsyncSession = Depends(get_db)) -> IUserRepository:
    """
    Create UserRepository instance with database session.
    :param db: Database session from get_db dependency
    :return: UserRepository instance
    """
    return UserRepository(db)


def get_room_repository(db: AsyncSession = Depends(get_db)) -> IRoomRepository:
    """
    Create RoomRepository instance with database session.
    :param db: Database session from get_db dependency
    :return: RoomRepository instance
    """
    return RoomRepository(db)
