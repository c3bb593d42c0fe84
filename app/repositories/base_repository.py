from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")


class BaseRepository(ABC, Generic[T]):
    """Abstract base repository providing common CRUD operations."""

    def __init__(self, db: AsyncSession):
        """
        Initialize repository with async database session.
        :param db: SQLAlchemy async database session
        """
        self.db = db

    @abstractmethod
    async def get_by_id(self, id: int) -> T | None:
        """
        Get entity by ID.
        :param id: Entity ID
        :return: Entity or None if not found
        """
        pass

    @abstractmethod
    async def create(self, entity: T) -> T:
        """
        Persist a new entity.
        :param entity: Entity to create
        :return: Created entity with generated ID
        """
        pass

    @abstractmethod
    async def update(self, entity: T) -> T:
        """
        Flush pending changes of an entity.
        :param entity: Entity to update
        :return: Updated entity
        """
        pass
