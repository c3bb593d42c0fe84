from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.core.validators import SanitizedOptionalString, SanitizedString


class MemberResponse(BaseModel):
    """
    Minimal user view used inside room responses.
    """

    id: int
    username: str

    model_config = ConfigDict(from_attributes=True)


class RoomResponse(BaseModel):
    """
    Schema for room responses.
    """

    id: int
    name: str
    description: str | None = None
    start_date: datetime
    end_date: datetime
    creator: MemberResponse
    members: list[MemberResponse] = Field(default_factory=list)
    interests: dict[str, list[str]] = Field(default_factory=dict)
    is_expired: bool
    version: int
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class RoomCreate(BaseModel):
    """
    Schema for creating a new room.
    Dates are optional: start defaults to now, end to start + default period.
    """

    name: SanitizedString = Field(min_length=1, max_length=100)
    description: SanitizedOptionalString = Field(None, max_length=500)
    start_date: datetime | None = None
    end_date: datetime | None = None
    interests: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Category to tags, e.g. {'music': ['jazz']}",
    )


class RoomUpdate(BaseModel):
    """
    Schema for partial room updates.

    Every field is optional. A missing, null or blank name/description means
    "no change"; a blank value can not be told apart from an absent one.
    start_date is only applied when end_date is sent as well.
    """

    name: SanitizedOptionalString = Field(None, max_length=100)
    description: SanitizedOptionalString = Field(None, max_length=500)
    start_date: datetime | None = None
    end_date: datetime | None = None
    interests: dict[str, list[str]] | None = None
    version: int | None = Field(None, ge=1, description="Last seen room version, rejected with 409 if stale")


class RoomDeleteResponse(BaseModel):
    """
    Confirmation after a room is deleted.
    """

    message: str
    room_id: int


class UserRoomsResponse(BaseModel):
    """
    Rooms owned and joined by the current user.
    """

    created: list[RoomResponse]
    joined: list[RoomResponse]
