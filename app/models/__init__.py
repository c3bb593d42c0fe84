from app.core.database import Base
from .user import User
from .room import Room, RoomInterests, room_members

__all__ = [
    "Base",
    "User",
    "Room",
    "RoomInterests",
    "room_members",
]
