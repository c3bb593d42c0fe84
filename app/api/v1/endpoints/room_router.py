from fastapi import APIRouter, Depends, status

from app.core.auth_dependencies import get_current_active_user
from app.core.validators import sanitize_username
from app.models.user import User
from app.schemas.auth_schemas import UserMembershipResponse
from app.schemas.room_schemas import (
    RoomCreate,
    RoomDeleteResponse,
    RoomResponse,
    RoomUpdate,
    UserRoomsResponse,
)
from app.services.room_service import RoomService
from app.services.service_dependencies import get_room_service

router = APIRouter(prefix="/rooms", tags=["rooms"])


@router.get("/", response_model=list[RoomResponse])
async def get_active_rooms(
    current_user: User = Depends(get_current_active_user),
    room_service: RoomService = Depends(get_room_service),
) -> list[RoomResponse]:
    """
    Get all rooms that have not ended yet.
    :param current_user: Current authenticated user
    :param room_service: Service instance handling room logic
    :return: List of active rooms
    """
    return await room_service.get_active_rooms()


@router.post("/", response_model=RoomResponse, status_code=status.HTTP_201_CREATED)
async def create_room(
    room_data: RoomCreate,
    current_user: User = Depends(get_current_active_user),
    room_service: RoomService = Depends(get_room_service),
) -> RoomResponse:
    """
    Create a new room owned by the caller.
    :param room_data: Room creation data
    :param current_user: Current authenticated user, becomes the creator
    :param room_service: Service instance handling room logic
    :return: Created room object
    """
    return await room_service.create_room(
        current_user=current_user,
        name=room_data.name,
        description=room_data.description,
        interests=room_data.interests,
        start_date=room_data.start_date,
        end_date=room_data.end_date,
    )


@router.get("/mine", response_model=UserRoomsResponse)
async def get_my_rooms(
    current_user: User = Depends(get_current_active_user),
    room_service: RoomService = Depends(get_room_service),
) -> UserRoomsResponse:
    """
    Rooms the caller created and rooms the caller joined.
    :param current_user: Current authenticated user
    :param room_service: Service instance handling room logic
    :return: Created and joined rooms
    """
    return await room_service.get_user_rooms(current_user)


@router.get("/health")
async def rooms_health():
    """Health check"""
    return {"status": "rooms endpoint working"}


@router.get("/{room_id}", response_model=RoomResponse)
async def get_room(
    room_id: int,
    current_user: User = Depends(get_current_active_user),
    room_service: RoomService = Depends(get_room_service),
) -> RoomResponse:
    """
    Get single room by ID.
    :param room_id: ID of room
    :param current_user: Current authenticated user
    :param room_service: Service instance handling room logic
    :return: Room object
    """
    return await room_service.get_room(room_id)


@router.patch("/{room_id}", response_model=RoomResponse)
async def update_room(
    room_id: int,
    room_data: RoomUpdate,
    current_user: User = Depends(get_current_active_user),
    room_service: RoomService = Depends(get_room_service),
) -> RoomResponse:
    """
    Partially update a room, creator only.
    :param room_id: ID of the room to update
    :param room_data: Fields to change
    :param current_user: Current authenticated user
    :param room_service: Service instance handling room logic
    :return: Updated room object
    """
    return await room_service.update_room(
        current_user=current_user,
        room_id=room_id,
        name=room_data.name,
        description=room_data.description,
        start_date=room_data.start_date,
        end_date=room_data.end_date,
        interests=room_data.interests,
        expected_version=room_data.version,
    )


@router.delete("/{room_id}", response_model=RoomDeleteResponse)
async def delete_room(
    room_id: int,
    current_user: User = Depends(get_current_active_user),
    room_service: RoomService = Depends(get_room_service),
) -> RoomDeleteResponse:
    """
    Delete a room, creator only.
    :param room_id: ID of room to delete
    :param current_user: Current authenticated user
    :param room_service: Service instance handling room logic
    :return: Deletion confirmation
    """
    return await room_service.delete_room(current_user, room_id)


@router.post("/{room_id}/join", response_model=UserMembershipResponse)
async def join_room(
    room_id: int,
    current_user: User = Depends(get_current_active_user),
    room_service: RoomService = Depends(get_room_service),
) -> UserMembershipResponse:
    """
    Caller joins room as a member.
    :param room_id: ID of room to join
    :param current_user: Current authenticated user
    :param room_service: Service instance handling room logic
    :return: The caller with joined room IDs
    """
    return await room_service.join_room(current_user, room_id)


@router.post("/{room_id}/leave", response_model=UserMembershipResponse)
async def leave_room(
    room_id: int,
    current_user: User = Depends(get_current_active_user),
    room_service: RoomService = Depends(get_room_service),
) -> UserMembershipResponse:
    """
    Caller leaves room.
    :param room_id: ID of room to leave
    :param current_user: Current authenticated user
    :param room_service: Service instance handling room logic
    :return: The caller with joined room IDs
    """
    return await room_service.leave_room(current_user, room_id)


@router.delete("/{room_id}/members/{username}", response_model=RoomResponse)
async def remove_member(
    room_id: int,
    username: str,
    current_user: User = Depends(get_current_active_user),
    room_service: RoomService = Depends(get_room_service),
) -> RoomResponse:
    """
    Creator removes a member from the room.
    :param room_id: Room ID
    :param username: Username of the member to remove
    :param current_user: Current authenticated user
    :param room_service: Service instance handling room logic
    :return: Updated room object
    """
    # usernames are stored escaped, see UserRegister
    return await room_service.remove_member(current_user, room_id, sanitize_username(username))
