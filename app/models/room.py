from sqlalchemy import JSON, Column, DateTime, ForeignKey, Index, Integer, String, Table, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.database import Base
from app.core.datetime_utils import ensure_utc, utc_now


room_members = Table(
    "room_members",
    Base.metadata,
    Column("room_id", Integer, ForeignKey("rooms.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("joined_at", DateTime(timezone=True), server_default=func.now()),
    Index("idx_room_members_user", "user_id"),
)


class Room(Base):
    """
    Time-bounded group owned by its creator.

    Business Rules:
    - start_date < end_date
    - creator is never part of members
    - every write bumps version (optimistic locking)
    """

    __tablename__ = "rooms"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)

    start_date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True), nullable=False, index=True)

    creator_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    version = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=True)

    creator = relationship("User", lazy="joined")
    members = relationship(
        "User",
        secondary=room_members,
        back_populates="joined_rooms",
        lazy="selectin",
        order_by="User.username",
    )
    room_interests = relationship(
        "RoomInterests",
        back_populates="room",
        uselist=False,
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    __mapper_args__ = {"version_id_col": version}

    @property
    def interests(self) -> dict[str, list[str]]:
        if self.room_interests is None:
            return {}
        return self.room_interests.tags or {}

    @property
    def member_ids(self) -> list[int]:
        return [member.id for member in self.members]

    @property
    def is_expired(self) -> bool:
        return ensure_utc(self.end_date) <= utc_now()

    def has_member(self, user_id: int) -> bool:
        return user_id in self.member_ids

    def touch(self) -> None:
        """Mark the row dirty so membership-only changes also bump version."""
        self.updated_at = utc_now()

    def __repr__(self):
        return f"<Room(id={self.id}, name='{self.name}')>"


class RoomInterests(Base):
    """Normalized interest tags of a room (1:1)."""

    __tablename__ = "room_interests"

    id = Column(Integer, primary_key=True)
    room_id = Column(Integer, ForeignKey("rooms.id", ondelete="CASCADE"), nullable=False, unique=True)
    tags = Column(JSON, nullable=False, default=dict)

    room = relationship("Room", back_populates="room_interests")

    def __repr__(self):
        return f"<RoomInterests(room_id={self.room_id}, tags={self.tags})>"
