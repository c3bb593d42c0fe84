from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.database import Base


class User(Base):
    """User model"""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Same rows as Room.members; must be loaded explicitly (selectinload)
    joined_rooms = relationship(
        "Room",
        secondary="room_members",
        back_populates="members",
        lazy="raise",
    )

    @property
    def joined_room_ids(self) -> list[int]:
        return sorted(room.id for room in self.joined_rooms)

    def __repr__(self):
        return f"<User (id={self.id}, username='{self.username}')>"
