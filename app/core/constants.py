# Room lifecycle
DEFAULT_ROOM_EXPIRATION_HOURS = 24

# Room interests: category -> allowed tags, in display order
ROOM_INTEREST_CATALOGUE = {
    "sports": ("football", "basketball", "volleyball", "tennis", "swimming", "running", "cycling", "hiking"),
    "music": ("pop", "rock", "jazz", "classical", "hiphop", "electronic", "folk", "metal"),
    "movies": ("action", "comedy", "drama", "horror", "documentary", "animation", "scifi"),
    "books": ("fiction", "fantasy", "history", "poetry", "biography", "science"),
    "games": ("board", "card", "video", "puzzle", "roleplay"),
    "technology": ("programming", "ai", "hardware", "startups", "security"),
    "travel": ("backpacking", "roadtrip", "camping", "cities"),
    "food": ("cooking", "baking", "vegan", "coffee", "tea"),
    "art": ("painting", "photography", "design", "theatre", "dance"),
}
MAX_INTERESTS_PER_CATEGORY = 5

# Error messages
ROOM_NOT_FOUND_MESSAGE = "Room not found"
USER_NOT_FOUND_MESSAGE = "User not found"
INTERESTS_ROOM_FORMAT_ERROR = "Interests do not match the room interest format"
INVALID_DATE_RANGE_MESSAGE = "End date must be after start date"
ROOM_EXPIRED_MESSAGE = "Room end date has already passed"
ALREADY_MEMBER_MESSAGE = "User is already a member of the room"
CREATOR_CANNOT_JOIN_MESSAGE = "User is the creator of the room"
CREATOR_CANNOT_LEAVE_MESSAGE = "Creator can not leave the room"
CANNOT_REMOVE_CREATOR_MESSAGE = "Creator can not be removed"
NOT_A_MEMBER_MESSAGE = "User is not a member of the room"
ROOM_DELETED_MESSAGE = "Room is deleted"

# Authentication & Token Configuration
DEFAULT_ACCESS_TOKEN_EXPIRE_MINUTES = 30
DEFAULT_JWT_ALGORITHM = "HS256"
ACCESS_TOKEN_COOKIE_NAME = "tg_access"

# Cookie Security Defaults
DEFAULT_COOKIE_SAMESITE = "lax"
DEFAULT_COOKIE_SECURE = False  # True in production via environment

# Time conversion constants
SECONDS_PER_MINUTE = 60
