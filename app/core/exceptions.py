"""
Domain exceptions raised by the service layer.

Each base class maps to one HTTP status through the handlers registered in
main.py, so services never import FastAPI types.
"""

from app.core.constants import (
    ALREADY_MEMBER_MESSAGE,
    CANNOT_REMOVE_CREATOR_MESSAGE,
    CREATOR_CANNOT_JOIN_MESSAGE,
    CREATOR_CANNOT_LEAVE_MESSAGE,
    INTERESTS_ROOM_FORMAT_ERROR,
    INVALID_DATE_RANGE_MESSAGE,
    NOT_A_MEMBER_MESSAGE,
    ROOM_EXPIRED_MESSAGE,
    ROOM_NOT_FOUND_MESSAGE,
    USER_NOT_FOUND_MESSAGE,
)


class DomainException(Exception):
    """Base class for all domain errors."""

    error_code = "DOMAIN_ERROR"

    def __init__(self, message: str, error_code: str | None = None):
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code


class NotFoundException(DomainException):
    error_code = "NOT_FOUND"


class ForbiddenException(DomainException):
    error_code = "FORBIDDEN"


class ValidationException(DomainException):
    error_code = "VALIDATION_ERROR"


class ConflictException(DomainException):
    error_code = "CONFLICT"


# Not found


class RoomNotFoundException(NotFoundException):
    error_code = "ROOM_NOT_FOUND"

    def __init__(self, room_id: int):
        super().__init__(f"{ROOM_NOT_FOUND_MESSAGE}: {room_id}")
        self.room_id = room_id


class UserNotFoundException(NotFoundException):
    error_code = "USER_NOT_FOUND"

    def __init__(self, username: str):
        super().__init__(f"{USER_NOT_FOUND_MESSAGE}: '{username}'")
        self.username = username


# Room rule violations


class InvalidDateRangeException(ValidationException):
    error_code = "INVALID_DATE_RANGE"

    def __init__(self):
        super().__init__(INVALID_DATE_RANGE_MESSAGE)


class RoomExpiredException(ValidationException):
    error_code = "ROOM_EXPIRED"

    def __init__(self):
        super().__init__(ROOM_EXPIRED_MESSAGE)


class InvalidInterestFormatException(ValidationException):
    error_code = "INVALID_INTEREST_FORMAT"

    def __init__(self):
        super().__init__(INTERESTS_ROOM_FORMAT_ERROR)


class AlreadyMemberException(ValidationException):
    error_code = "ALREADY_MEMBER"

    def __init__(self):
        super().__init__(ALREADY_MEMBER_MESSAGE)


class CreatorCannotJoinException(ValidationException):
    error_code = "CREATOR_CANNOT_JOIN"

    def __init__(self):
        super().__init__(CREATOR_CANNOT_JOIN_MESSAGE)


class CreatorCannotLeaveException(ValidationException):
    error_code = "CREATOR_CANNOT_LEAVE"

    def __init__(self):
        super().__init__(CREATOR_CANNOT_LEAVE_MESSAGE)


class CannotRemoveCreatorException(ValidationException):
    error_code = "CANNOT_REMOVE_CREATOR"

    def __init__(self):
        super().__init__(CANNOT_REMOVE_CREATOR_MESSAGE)


class NotAMemberException(ValidationException):
    error_code = "NOT_A_MEMBER"

    def __init__(self, username: str | None = None):
        message = NOT_A_MEMBER_MESSAGE if username is None else f"User '{username}' is not a member of the room"
        super().__init__(message)


# Concurrency


class RoomVersionConflictException(ConflictException):
    error_code = "ROOM_VERSION_CONFLICT"

    def __init__(self, room_id: int):
        super().__init__(f"Room {room_id} was modified by another request, reload and retry")
        self.room_id = room_id
