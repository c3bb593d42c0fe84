from datetime import datetime, timedelta

import structlog

from app.core.constants import DEFAULT_ROOM_EXPIRATION_HOURS, ROOM_DELETED_MESSAGE
from app.core.datetime_utils import ensure_utc, utc_now
from app.core.exceptions import (
    AlreadyMemberException,
    CannotRemoveCreatorException,
    CreatorCannotJoinException,
    CreatorCannotLeaveException,
    ForbiddenException,
    InvalidDateRangeException,
    InvalidInterestFormatException,
    NotAMemberException,
    RoomExpiredException,
    RoomNotFoundException,
    RoomVersionConflictException,
    UserNotFoundException,
)
from app.models.room import Room
from app.models.user import User
from app.repositories.room_repository import IRoomRepository
from app.repositories.user_repository import IUserRepository
from app.services.interests_service import is_valid_room_interest, set_interests_for_room

logger = structlog.get_logger(__name__)


class RoomService:
    """Service for room lifecycle and membership rules using Repository Pattern."""

    def __init__(
        self,
        room_repo: IRoomRepository,
        user_repo: IUserRepository,
        default_expiration_hours: int = DEFAULT_ROOM_EXPIRATION_HOURS,
    ):
        self.room_repo = room_repo
        self.user_repo = user_repo
        self.default_expiration = timedelta(hours=default_expiration_hours)

    async def create_room(
        self,
        current_user: User,
        name: str,
        description: str | None,
        interests: dict[str, list[str]] | None = None,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> Room:
        """
        Create a room owned by the current user.
        :param current_user: Creator of the room
        :param name: Room name
        :param description: Room description
        :param interests: Interest tags, empty when omitted
        :param start_date: Start, defaults to now and is clamped to now if past
        :param end_date: End, defaults to start + default expiration period
        :return: Created room
        """
        now = utc_now()
        start = self._as_utc(start_date) if start_date else now
        try:
            end = self._as_utc(end_date) if end_date else start + self.default_expiration
        except OverflowError:
            # start too close to datetime.max for the default period
            raise InvalidDateRangeException()

        if now >= end:
            raise RoomExpiredException()
        if start >= end:
            raise InvalidDateRangeException()
        if start < now:
            start = now

        interests = interests if interests is not None else {}
        if not is_valid_room_interest(interests):
            raise InvalidInterestFormatException()

        room = Room(
            name=name,
            description=description,
            start_date=start,
            end_date=end,
            creator_id=current_user.id,
            creator=current_user,
            members=[],
        )
        set_interests_for_room(interests, room)

        created = await self.room_repo.create(room)
        logger.info(
            "room_created",
            room_id=created.id,
            creator=current_user.username,
            start_date=start.isoformat(),
            end_date=end.isoformat(),
        )
        return created

    async def get_room(self, room_id: int) -> Room:
        """Get room by ID with validation."""
        return await self._get_room_or_404(room_id)

    async def get_active_rooms(self) -> list[Room]:
        """Get rooms that have not ended yet."""
        return await self.room_repo.get_active_rooms(utc_now())

    async def get_user_rooms(self, current_user: User) -> dict:
        """
        Rooms the user owns and rooms the user joined.
        :param current_user: Authenticated user
        :return: Dict with 'created' and 'joined' room lists
        """
        created = await self.room_repo.get_by_creator(current_user.id)
        joined = await self.room_repo.get_joined_by_user(current_user.id)
        return {"created": created, "joined": joined}

    async def join_room(self, current_user: User, room_id: int) -> User:
        """
        Add the current user to the room members.
        :param current_user: User joining
        :param room_id: Room ID to join
        :return: The user, with the room in its joined rooms
        """
        room = await self._get_room_or_404(room_id)

        if room.has_member(current_user.id):
            raise AlreadyMemberException()
        if room.creator_id == current_user.id:
            raise CreatorCannotJoinException()

        room.members.append(current_user)
        room.touch()
        await self.room_repo.update(room)

        logger.info("room_member_joined", room_id=room_id, username=current_user.username)
        return current_user

    async def remove_member(self, current_user: User, room_id: int, username: str) -> Room:
        """
        Creator removes a member from the room.
        :param current_user: Caller, must be the creator
        :param room_id: Room ID
        :param username: Username of the member to remove
        :return: Updated room
        """
        room = await self._get_room_or_404(room_id)
        self._ensure_creator(room, current_user, "Only the room creator can remove members")

        target = await self.user_repo.get_by_username(username)
        if target is None:
            raise UserNotFoundException(username)
        if target.id == current_user.id:
            raise CannotRemoveCreatorException()
        if not room.has_member(target.id):
            raise NotAMemberException(username)

        self._drop_member(room, target.id)
        updated = await self.room_repo.update(room)

        logger.info(
            "room_member_removed",
            room_id=room_id,
            removed=username,
            removed_by=current_user.username,
        )
        return updated

    async def leave_room(self, current_user: User, room_id: int) -> User:
        """
        Current user leaves the room. Membership is a single relation, so the
        room's member list and the user's joined rooms both lose the entry.
        :param current_user: User leaving
        :param room_id: Room ID to leave
        :return: The user, without the room in its joined rooms
        """
        room = await self._get_room_or_404(room_id)

        if room.creator_id == current_user.id:
            raise CreatorCannotLeaveException()
        if not room.has_member(current_user.id):
            raise NotAMemberException()

        self._drop_member(room, current_user.id)
        await self.room_repo.update(room)

        logger.info("room_member_left", room_id=room_id, username=current_user.username)
        return current_user

    async def update_room(
        self,
        current_user: User,
        room_id: int,
        name: str | None = None,
        description: str | None = None,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
        interests: dict[str, list[str]] | None = None,
        expected_version: int | None = None,
    ) -> Room:
        """
        Partial update by the creator. None and blank strings leave name and
        description unchanged. start_date is only applied together with end_date.
        Everything is validated before the room is touched.
        :param current_user: Caller, must be the creator
        :param room_id: Room ID
        :param expected_version: Version the client last saw, checked if given
        :return: Updated room
        """
        room = await self._get_room_or_404(room_id)
        self._ensure_creator(room, current_user, "Only the room creator can update the room")

        if expected_version is not None and expected_version != room.version:
            raise RoomVersionConflictException(room_id)

        now = utc_now()
        new_start = None
        new_end = None
        if end_date is not None:
            new_end = self._as_utc(end_date)
            if now >= new_end:
                raise RoomExpiredException()
            if start_date is not None:
                new_start = self._as_utc(start_date)
                if new_start >= new_end:
                    raise InvalidDateRangeException()
                if new_start < now:
                    new_start = now
            elif ensure_utc(room.start_date) >= new_end:
                raise InvalidDateRangeException()

        if interests is not None and not is_valid_room_interest(interests):
            raise InvalidInterestFormatException()

        if name:
            room.name = name
        if description:
            room.description = description
        if new_end is not None:
            room.end_date = new_end
        if new_start is not None:
            room.start_date = new_start
        if interests is not None:
            set_interests_for_room(interests, room)
        room.touch()

        updated = await self.room_repo.update(room)
        logger.info("room_updated", room_id=room_id, version=updated.version)
        return updated

    async def delete_room(self, current_user: User, room_id: int) -> dict:
        """
        Creator deletes the room.
        :param current_user: Caller, must be the creator
        :param room_id: Room ID to delete
        :return: Confirmation
        """
        room = await self._get_room_or_404(room_id)
        self._ensure_creator(room, current_user, "Only the room creator can delete the room")

        await self.room_repo.delete(room_id)

        logger.info("room_deleted", room_id=room_id, deleted_by=current_user.username)
        return {"message": ROOM_DELETED_MESSAGE, "room_id": room_id}

    async def _get_room_or_404(self, room_id: int) -> Room:
        """Get room by ID or raise RoomNotFoundException."""
        room = await self.room_repo.get_by_id(room_id)
        if not room:
            raise RoomNotFoundException(room_id)
        return room

    @staticmethod
    def _as_utc(value: datetime) -> datetime:
        try:
            return ensure_utc(value)
        except OverflowError:
            raise InvalidDateRangeException()

    @staticmethod
    def _ensure_creator(room: Room, user: User, message: str) -> None:
        if room.creator_id != user.id:
            raise ForbiddenException(message)

    @staticmethod
    def _drop_member(room: Room, user_id: int) -> None:
        for member in list(room.members):
            if member.id == user_id:
                room.members.remove(member)
        room.touch()
